# app/core/exceptions.py
# Domain errors raised by the service layer; app.main turns them into responses.


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or empty required input. The caller can fix and resubmit."""
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class NotFoundError(AppError):
    """User or owned review does not resolve.

    "Not yours" and "does not exist" both end up here with the same message.
    """
    status_code = 404


class StoreError(AppError):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
