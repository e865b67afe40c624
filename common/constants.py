"""Project-wide constants (chunk size, HTTP defaults, version)."""

VERSION: str = "V0.1.0"

DEFAULT_CHUNK_SIZE_BYTES: int = 5_000_000
DEFAULT_HTTP_METHOD: str = "PUT"
DEFAULT_TIMEOUT_SECONDS: float = 30.0

SUCCESS_STATUS_CODE: int = 200
EMPTY_BODY_PLACEHOLDER: str = "Response body is empty"
