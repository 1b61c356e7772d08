"""API routes, mounted under API_PREFIX (/api)."""

from fastapi import APIRouter

from fzscripts.api import auth, health, scripts, users

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(scripts.router, prefix="/scripts", tags=["scripts"])
router.include_router(users.router, prefix="/users", tags=["users"])
