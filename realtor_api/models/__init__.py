"""
Database models for the Realtor API.
Includes User, Home, Image and Message models.
"""

from realtor_api.models.user import User, UserRole
from realtor_api.models.home import Home, PropertyType
from realtor_api.models.image import Image
from realtor_api.models.message import Message

# Export all models for easy importing
__all__ = [
    "User",
    "UserRole",
    "Home",
    "PropertyType",
    "Image",
    "Message",
]
