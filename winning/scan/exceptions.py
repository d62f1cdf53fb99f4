"""Scan domain exceptions."""

from winning.core.exceptions import ExternalServiceError, ValidationError


class InvalidScanRequestError(ValidationError):
    error_type = "invalid_scan_request"

    def __init__(self, message: str = "Invalid scan request"):
        super().__init__(message)


class ScanFailedError(ExternalServiceError):
    """Raised when neither the workflow nor the model produced products."""

    error_type = "scan_failed"

    def __init__(self, message: str = "Product scan failed"):
        super().__init__(message)
