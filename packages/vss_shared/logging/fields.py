"""Record attribute names for VSS request correlation."""

OPERATION = "operation"
STORE_ID = "store_id"
URL = "url"
STATUS_CODE = "status_code"
ERROR_CODE = "error_code"
