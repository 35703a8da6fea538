"""Accounts API: user registration and credential checks over HTTP."""
