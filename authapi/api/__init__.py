"""API routes."""

from fastapi import APIRouter

from authapi.api import accounts

router = APIRouter()
router.include_router(accounts.router, tags=["accounts"])
