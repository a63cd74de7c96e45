"""
Repository layer for data access operations.
"""

from realtor_api.repositories.base import BaseRepository
from realtor_api.repositories.home import HomeRepository, HomeSearchFilters
from realtor_api.repositories.image import ImageRepository
from realtor_api.repositories.message import MessageRepository
from realtor_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "HomeRepository",
    "HomeSearchFilters",
    "ImageRepository",
    "MessageRepository",
    "UserRepository"
]
