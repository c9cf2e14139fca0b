"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .user_repository import UserRepository
from .email_category_repository import EmailCategoryRepository
from .email_content_repository import EmailContentRepository
from .form_repository import FormRepository
from .form_submission_repository import FormSubmissionRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "EmailCategoryRepository",
    "EmailContentRepository",
    "FormRepository",
    "FormSubmissionRepository",
]
