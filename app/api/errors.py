"""API error types rendered as {"error": message} responses"""
from typing import Optional


class ApiError(Exception):
    """Error with an HTTP status code and a client-facing message"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_content(self) -> dict:
        return {"error": self.message}


class BadRequest(ApiError):
    """Missing or invalid input"""
    status_code = 400


class NotFound(ApiError):
    """Referenced tenant, course or session does not exist"""
    status_code = 404
