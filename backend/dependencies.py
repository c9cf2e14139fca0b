"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances and
resolving the authenticated user. Tests override get_db (or a service
factory) through app.dependency_overrides.
"""

from sqlalchemy.orm import Session
from fastapi import Depends, HTTPException
from database import get_db
from constants import HTTPStatus
from exceptions import AuthenticationError
from models import User
from services.auth_service import AuthService
from services.email_category_service import EmailCategoryService
from services.email_content_service import EmailContentService
from services.form_service import FormService
from services.form_submission_service import FormSubmissionService
from services.interfaces import IFormService, IFormSubmissionService
from utils.security import TokenData, require_user


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_email_category_service(db: Session = Depends(get_db)) -> EmailCategoryService:
    return EmailCategoryService(db)


def get_email_content_service(db: Session = Depends(get_db)) -> EmailContentService:
    return EmailContentService(db)


def get_form_service(db: Session = Depends(get_db)) -> IFormService:
    """
    Factory function for creating FormService instances.

    Args:
        db: Database session (injected)

    Returns:
        IFormService: Form service implementation
    """
    return FormService(db)


def get_form_submission_service(db: Session = Depends(get_db)) -> IFormSubmissionService:
    """
    Factory function for creating FormSubmissionService instances.

    Args:
        db: Database session (injected)

    Returns:
        IFormSubmissionService: Submission service implementation
    """
    return FormSubmissionService(db)


def get_current_user(
    token: TokenData = Depends(require_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve the user behind the bearer token.

    Raises:
        HTTPException: 401 if the token's user no longer exists
    """
    try:
        return auth_service.get_user(token.user_id)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
