from fastapi import APIRouter, Depends

from src.dashboard.analytics.validation import validate_filters as check_filters
from src.dashboard.dependencies import get_host_email
from src.dashboard.schemas import FilterRequest, FilterValidationResponse
from src.dashboard.urls import VALIDATE_FILTERS_URL

router = APIRouter()


@router.post(VALIDATE_FILTERS_URL, response_model=FilterValidationResponse)
async def validate_filters(
    filters: FilterRequest,
    host_email: str = Depends(get_host_email),
) -> FilterValidationResponse:
    """Check filter parameters without running them."""
    errors = check_filters(filters)
    return FilterValidationResponse(is_valid=not errors, errors=errors)
