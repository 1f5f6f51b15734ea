DASHBOARD_PREFIX = "/api/v1/dashboard"

DASHBOARD_URL = DASHBOARD_PREFIX + "/events/{event_id}"
DASHBOARD_SUMMARY_URL = DASHBOARD_URL + "/summary"
DASHBOARD_ANALYTICS_URL = DASHBOARD_URL + "/analytics"
DASHBOARD_TRENDS_URL = DASHBOARD_URL + "/trends"
DASHBOARD_DIETARY_URL = DASHBOARD_URL + "/dietary-analysis"
DASHBOARD_GUESTS_URL = DASHBOARD_URL + "/guest-analysis"
DASHBOARD_TIMELINE_URL = DASHBOARD_URL + "/timeline"

FILTER_RESPONSES_URL = DASHBOARD_URL + "/filter"
EXPORT_DASHBOARD_URL = DASHBOARD_URL + "/export"

VALIDATE_FILTERS_URL = DASHBOARD_PREFIX + "/validate-filters"
HOST_ANALYTICS_URL = DASHBOARD_PREFIX + "/host-analytics"
