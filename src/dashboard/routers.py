from fastapi import APIRouter

from .features.export_dashboard.router import router as export_dashboard_router
from .features.filter_responses.router import router as filter_responses_router
from .features.get_dashboard.router import router as get_dashboard_router
from .features.host_analytics.router import router as host_analytics_router
from .features.validate_filters.router import router as validate_filters_router

router = APIRouter()

router.include_router(get_dashboard_router)
router.include_router(filter_responses_router)
router.include_router(export_dashboard_router)
router.include_router(validate_filters_router)
router.include_router(host_analytics_router)
