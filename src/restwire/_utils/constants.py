# Environment variables
ENV_BASE_URL = "RESTWIRE_URL"
ENV_TIMEOUT = "RESTWIRE_TIMEOUT"
ENV_MAX_WORKERS = "RESTWIRE_MAX_WORKERS"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_ENCODING = "Content-Encoding"
HEADER_ACCEPT_ENCODING = "Accept-Encoding"

# Content types
CONTENT_TYPE_JSON = "application/json"

# Content encodings
ENCODING_GZIP = "gzip"
ENCODING_DEFLATE = "deflate"
ENCODING_IDENTITY = "identity"
SUPPORTED_ACCEPT_ENCODING = f"{ENCODING_GZIP}, {ENCODING_DEFLATE}"

DEFAULT_TIMEOUT = 30.0

# Upper bound for the transport's worker pool when none is configured. Threads
# are only started when no idle worker is available.
DEFAULT_MAX_WORKERS = 1024
