from typing import Optional

from fastapi import HTTPException, status


class CertificateServiceError(HTTPException):
    """Error reported to the caller as {error, message, details?}"""

    error = "INTERNAL_ERROR"
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An unexpected error occurred"
    headers: Optional[dict[str, str]] = None

    def __init__(self, message: Optional[str] = None, details: Optional[list[str]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(
            status_code=self.default_status,
            detail=self.message,
            headers=self.headers
        )

    def to_dict(self) -> dict:
        content = {"error": self.error, "message": self.message}
        if self.details is not None:
            content["details"] = self.details

        return content


class MethodNotAllowedError(CertificateServiceError):
    error = "METHOD_NOT_ALLOWED"
    default_status = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Only POST method is allowed"
    headers = {"Allow": "POST"}


class InvalidApiKeyError(CertificateServiceError):
    error = "INVALID_API_KEY"
    default_status = status.HTTP_401_UNAUTHORIZED
    default_message = "The provided API key is invalid"


class ValidationError(CertificateServiceError):
    error = "VALIDATION_ERROR"
    default_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request parameters"


class InternalError(CertificateServiceError):
    pass
