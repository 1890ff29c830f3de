APP_NAME = "FinSync"
APP_WIDTH = 1100
APP_HEIGHT = 720

DEFAULT_API_BASE_URL = "http://localhost:3001/api"
API_URL_ENV_VAR = "FINSYNC_API_URL"
REQUEST_TIMEOUT_SECONDS = 10

DEFAULT_CURRENCY_SYMBOL = "R$"
DEFAULT_DATE_FORMAT = "DD/MM/YYYY"
MIN_PASSWORD_LENGTH = 6

TYPE_FILTERS = ["all", "income", "expense"]
TIME_WINDOWS = ["all", "year", "month", "week", "day"]

TIME_WINDOW_LABELS = {
    "all":   "All time",
    "year":  "This year",
    "month": "This month",
    "week":  "This week",
    "day":   "Today",
}

TYPE_FILTER_LABELS = {
    "all":     "All",
    "income":  "Income",
    "expense": "Expenses",
}

TYPE_COLORS = {
    "income":  "#4CAF50",
    "expense": "#F44336",
}

DASHBOARD_RECENT_LIMIT = 6
POLL_INTERVAL_MS = 50

# Fallback messages, one per call site
LOAD_ERROR_FALLBACK = "Failed to load transactions"
CREATE_ERROR_FALLBACK = "Failed to create transaction"
UPDATE_ERROR_FALLBACK = "Failed to update transaction"
LOGIN_ERROR_FALLBACK = "Server unavailable. Try again later."
REGISTER_ERROR_FALLBACK = "Registration failed. Please try again."
NOT_AUTHENTICATED_MESSAGE = "User not authenticated"
