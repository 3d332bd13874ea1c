"""Custom exceptions for the application"""

class PropmanException(Exception):
    """Base exception class for propman"""
    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class AuthenticationError(PropmanException):
    """Raised when authentication fails"""
    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, "AUTHENTICATION_ERROR")


class BadRequestError(PropmanException):
    """Raised when a payload or route parameter is missing or inconsistent"""
    def __init__(self, message: str = "Bad request"):
        super().__init__(message, "BAD_REQUEST_ERROR")


class NotFoundError(PropmanException):
    """Raised when a resource is not found"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, "NOT_FOUND_ERROR")


class ConflictError(PropmanException):
    """Raised when there's a conflict (e.g., duplicate username)"""
    def __init__(self, message: str = "Conflict occurred"):
        super().__init__(message, "CONFLICT_ERROR")


class StorageError(PropmanException):
    """Raised when uploaded files cannot be written to disk"""
    def __init__(self, message: str = "Storage failure"):
        super().__init__(message, "STORAGE_ERROR")
