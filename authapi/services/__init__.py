"""Account services: registration and credential checks."""
