from pydantic import BaseModel, ConfigDict, Field


class GuestCountRange(BaseModel):
    min: int | None = None
    max: int | None = None


class DateRangeRequest(BaseModel):
    """Bounds are kept as raw strings so bad dates can be reported, not rejected."""

    start: str | None = None
    end: str | None = None


class FilterRequest(BaseModel):
    """Filter and sort options as sent by the dashboard.

    Keys are accepted in camelCase (`guestCount`, `sortBy`, ...) as well as
    by field name.
    """

    model_config = ConfigDict(populate_by_name=True)

    attendance: str | None = None
    search: str | None = None
    dietary_options: list[str] = Field(default=[], alias="dietaryOptions")
    guest_count: GuestCountRange | None = Field(default=None, alias="guestCount")
    date_range: DateRangeRequest | None = Field(default=None, alias="dateRange")
    sort_by: str | None = Field(default=None, alias="sortBy")


class FilterValidationResponse(BaseModel):
    is_valid: bool
    errors: list[str]
