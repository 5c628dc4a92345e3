"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from tracker.presentation.api.v1.endpoints.health import router as health_router
from tracker.presentation.api.v1.endpoints.clients import router as clients_router
from tracker.presentation.api.v1.endpoints.progress import router as progress_router
from tracker.presentation.api.v1.endpoints.notes import router as notes_router
from tracker.presentation.api.v1.endpoints.catalog import router as catalog_router
from tracker.presentation.api.v1.endpoints.docs import router as docs_router
from tracker.presentation.api.v1.endpoints.tips import router as tips_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(progress_router)
router.include_router(notes_router)
router.include_router(catalog_router)
router.include_router(docs_router)
router.include_router(tips_router)
