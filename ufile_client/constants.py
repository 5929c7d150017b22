"""
Constants for UFile client library.
Wire-level names and defaults of the UCloud UFile HTTP API.
"""

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_ETAG = "ETag"
HEADER_SESSION_ID = "X-SessionId"
HEADER_HOST = "Host"

# Authorization scheme tag ("UCloud <public-key>:<signature>")
AUTH_SCHEME = "UCloud"

CONTENT_TYPE_JSON = "application/json"

# Verbs supported by the object API
VERB_HEAD = "HEAD"
VERB_GET = "GET"
VERB_PUT = "PUT"

# Per-verb domain suffixes used when no proxy URL is configured
UPLOAD_SUFFIX = ".ufile.ucloud.cn"
DOWNLOAD_SUFFIX = ".ufile.ucloud.com.cn"

# Stripped from the proxy hostname to get the bucket base host
WWW_PREFIX = "www."

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 60,              # HTTP timeout in seconds
    'max_retries': 1,           # PUT retries after the first attempt
    'retry_interval': 1,        # Fixed backoff between PUT attempts, seconds
    'upload_suffix': UPLOAD_SUFFIX,
    'download_suffix': DOWNLOAD_SUFFIX,
}

# Management API defaults
DEFAULT_API_CONFIG = {
    'timeout': 30,
}
