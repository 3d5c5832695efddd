from fastapi import status
from .base import InkwellException


class ValidationError(InkwellException):
    """Exception raised when validation fails"""
    
    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )


class ConflictError(InkwellException):
    """Exception raised when a unique resource already exists"""
    
    def __init__(self, detail: str):
        # 400 rather than 409: the web client branches on 400 for registration errors
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )
