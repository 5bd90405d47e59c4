"""0.1 API router — aggregates all 0.1 endpoint routers."""

from fastapi import APIRouter

from hoops.presentation.api.v0_1.endpoints.health import router as health_router
from hoops.presentation.api.v0_1.endpoints.hoops import router as hoops_router

router = APIRouter(prefix="/0.1")
router.include_router(health_router)
router.include_router(hoops_router)
