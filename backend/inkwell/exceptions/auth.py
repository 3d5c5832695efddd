from fastapi import status
from .base import InkwellException


class AuthenticationError(InkwellException):
    """Exception raised when authentication fails or is missing"""
    
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"}
        )


class AuthorizationError(InkwellException):
    """Exception raised when user is not authorized"""
    
    def __init__(self, detail: str = "Access denied"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_403_FORBIDDEN
        )


class InvalidTokenError(InkwellException):
    """Exception raised when a password reset token cannot be used"""
    
    def __init__(self, detail: str = "Invalid or expired reset token"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )
