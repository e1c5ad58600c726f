"""Limits and fixed values shared across the client."""

# Absolute minimum part size (5 MiB) below which a part in a multipart
# upload may not be uploaded.
ABS_MIN_PART_SIZE = 1024 * 1024 * 5

# Minimum part size (128 MiB) after which an upload switches to multipart.
MIN_PART_SIZE = 1024 * 1024 * 128

# Maximum number of parts for a single multipart session.
MAX_PARTS_COUNT = 10000

# Maximum part size (5 GiB) for a single multipart upload operation.
MAX_PART_SIZE = 1024 * 1024 * 1024 * 5

# Maximum object size (5 GiB) for a single PUT operation.
MAX_SINGLE_PUT_OBJECT_SIZE = 1024 * 1024 * 1024 * 5

# Maximum object size (5 TiB) for a multipart operation.
MAX_MULTIPART_PUT_OBJECT_SIZE = 1024 * 1024 * 1024 * 1024 * 5

# Value of the X-Amz-Content-Sha256 header when the payload is not signed.
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"

# Number of parallel workers used for multipart operations.
TOTAL_WORKERS = 4

# Signature related values.
SIGN_V4_ALGORITHM = "AWS4-HMAC-SHA256"
ISO8601_DATE_FORMAT = "%Y%m%dT%H%M%SZ"

# Storage class header.
AMZ_STORAGE_CLASS = "X-Amz-Storage-Class"

# Website redirect location header.
AMZ_WEBSITE_REDIRECT_LOCATION = "X-Amz-Website-Redirect-Location"