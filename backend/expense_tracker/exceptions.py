from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Raised when an entity with the requested id does not exist."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenError(HTTPException):
    """Raised when the requester neither owns the resource nor is an admin."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ValidationFailure(HTTPException):
    """Raised when a request is well-formed but violates a business rule."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
