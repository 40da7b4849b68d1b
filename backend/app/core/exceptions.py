from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or invalid request fields."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(AppError):
    """Missing cart, product or line item."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UnexpectedError(AppError):
    """Any other failure. The message sent to clients is always generic."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
