from .exceptions import (
    PropmanException, AuthenticationError, BadRequestError,
    NotFoundError, ConflictError, StorageError
)

__all__ = [
    'PropmanException', 'AuthenticationError', 'BadRequestError',
    'NotFoundError', 'ConflictError', 'StorageError'
]
