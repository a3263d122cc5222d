"""Linear API exception hierarchy."""


class LinearAPIError(Exception):
    """Base exception for Linear API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class LinearAuthenticationError(LinearAPIError):
    """Raised when authentication fails (401 or AUTHENTICATION_ERROR)."""

    def __init__(self, message: str = "Authentication failed. Check LINEAR_API_KEY."):
        super().__init__(message, status_code=401)


class LinearPermissionError(LinearAPIError):
    """Raised when the API key lacks access to the requested entity (403)."""

    def __init__(self, message: str = "Permission denied."):
        super().__init__(message, status_code=403)


class LinearNotFoundError(LinearAPIError):
    """Raised when an entity is not found (404 or null entity)."""

    def __init__(self, message: str = "Entity not found."):
        super().__init__(message, status_code=404)


class LinearValidationError(LinearAPIError):
    """Raised when the request variables are rejected (400)."""

    def __init__(self, message: str = "Validation error."):
        super().__init__(message, status_code=400)


class LinearConnectionError(LinearAPIError):
    """Raised when the API cannot be reached (DNS, connect, timeout)."""

    def __init__(self, message: str = "Could not reach the Linear API."):
        super().__init__(message, status_code=None)
