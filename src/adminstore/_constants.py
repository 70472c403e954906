"""Internal constants shared across the library."""

BASE_URL = "http://localhost:3000"
USER_AGENT = "adminstore/1"
DEFAULT_REQUEST_TIMEOUT = 30.0

MODULES_ENDPOINT = "/api/admin/modules"
DASHBOARD_STATS_ENDPOINT = "/api/admin/dashboard/stats"
DASHBOARD_REALTIME_ENDPOINT = "/api/admin/dashboard/realtime"
DASHBOARD_CONVERSIONS_ENDPOINT = "/api/admin/dashboard/conversions"
DASHBOARD_SHOPIFY_ENDPOINT = "/api/admin/dashboard/shopify"

SYNC_ACTION = "sync"
