"""
Service layer for business logic implementation.
Contains services for authentication, listings, inquiries and error handling.
"""

from .auth import AuthService
from .home import HomeService
from .inquiry import InquiryService
from .error_handler import ErrorHandlerService

__all__ = [
    "AuthService",
    "HomeService",
    "InquiryService",
    "ErrorHandlerService"
]
