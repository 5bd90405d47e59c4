"""Top-level API router — includes versioned sub-routers."""

from fastapi import APIRouter

from hoops.presentation.api.v0_1.router import router as v0_1_router

router = APIRouter(prefix="/api")
router.include_router(v0_1_router)
