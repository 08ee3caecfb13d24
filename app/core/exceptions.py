from typing import Optional, Any

class UserPostsError(Exception):
    """
    Base exception for the UserPosts API.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class InvalidIdentifierError(UserPostsError):
    """
    Raised when an id supplied for a write is not a valid ObjectId.
    """
    def __init__(self, value: Any, field: str = "id"):
        super().__init__(
            f"Invalid {field}: {value!r} is not a valid ObjectId",
            code="INVALID_ID",
            status_code=400,
            details={"field": field, "value": str(value)},
        )

class StoreUnavailableError(UserPostsError):
    """
    Raised when the document store has not been initialized.
    """
    def __init__(self, message: str = "Document store is not available", details: Optional[Any] = None):
        super().__init__(message, code="STORE_UNAVAILABLE", status_code=503, details=details)
