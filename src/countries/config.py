"""Static configuration values shared by the controllers."""

SEARCH_DEBOUNCE_MS = 300
DEFAULT_LOCALE = "en"

LOG_LEVEL_ENV = "COUNTRIES_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
