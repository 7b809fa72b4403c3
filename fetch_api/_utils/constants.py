# Environment variables
ENV_BASE_URL = "FETCH_API_BASE_URL"
ENV_ORIGIN = "FETCH_API_ORIGIN"
ENV_CSRF_COOKIE_NAME = "FETCH_API_CSRF_COOKIE_NAME"
ENV_CSRF_HEADER_NAME = "FETCH_API_CSRF_HEADER_NAME"
ENV_TRAILING_SLASH = "FETCH_API_TRAILING_SLASH"
ENV_DEBUG = "FETCH_API_DEBUG"
ENV_DISABLE_SSL_VERIFY = "FETCH_API_DISABLE_SSL_VERIFY"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"

# Defaults
DEFAULT_CSRF_COOKIE_NAME = "csrftoken"
DEFAULT_CSRF_HEADER_NAME = "X-CSRFToken"

# Content types
APPLICATION_JSON = "application/json"
