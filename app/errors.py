# app/errors.py


class ServiceError(Exception):
    """Base exception for errors surfaced to API callers."""

    def __init__(self, error: str, message: str, status_code: int = 500):
        self.error = error
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class ReportError(ServiceError):
    """Raised when any GA4 report request fails (network, auth, quota...)."""

    def __init__(self, message: str):
        super().__init__("Failed to fetch analytics data", message, status_code=500)
