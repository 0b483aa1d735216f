"""Internal constants shared across the library."""

DEFAULT_DOMAIN = "https://openapi.sheincorp.com"
DEFAULT_TIMEOUT = 30.0
CONTENT_TYPE = "application/json;charset=UTF-8"

# ------------------------------------------------------------------
# Signed request headers
# ------------------------------------------------------------------

HEADER_APP_ID = "x-lt-appid"
HEADER_OPEN_KEY_ID = "x-lt-openKeyId"
HEADER_TIMESTAMP = "x-lt-timestamp"
HEADER_SIGNATURE = "x-lt-signature"

#: Nonce length the vendor SDK uses for the ``x-lt-signature`` prefix.
HEADER_RANDOM_KEY_LENGTH = 5

GET_BY_TOKEN_PATH = "/open-api/auth/get-by-token"
