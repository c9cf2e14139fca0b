"""
Service Interfaces

Abstract base classes for the form services.
Routers and dependency providers are typed against these.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from constants import FormSort


class IFormService(ABC):
    """
    Interface for the form builder.

    Every method that returns a form returns the whole aggregate
    (sections and fields ordered by order_index).
    """

    @abstractmethod
    def get_form(self, form_id: str) -> Any:
        """
        Get a form with its sections and fields.

        Raises:
            NotFoundError: If no such form exists
        """
        pass

    @abstractmethod
    def get_form_structure(self, form_id: str) -> Any:
        """Get the public structure of a form."""
        pass

    @abstractmethod
    def list_forms(
        self,
        name: Optional[str] = None,
        created_at: Optional[date] = None,
        page: int = 1,
        items_per_page: int = 10,
        sort: FormSort = FormSort.UPDATED_AT_DESC
    ) -> Dict[str, Any]:
        """
        List forms.

        Returns:
            Dictionary with data (forms) and meta (pagination)
        """
        pass

    @abstractmethod
    def create_form(self, request: Any) -> Any:
        """Create a form with its sections and fields."""
        pass

    @abstractmethod
    def update_form(self, form_id: str, request: Any) -> Any:
        """Replace a form's attributes, sections and fields atomically."""
        pass

    @abstractmethod
    def delete_form(self, form_id: str) -> None:
        """
        Delete a form.

        Raises:
            ConflictError: If the form has submissions
        """
        pass


class IFormSubmissionService(ABC):
    """Interface for storing and reading form submissions."""

    @abstractmethod
    def create_submission(self, form_id: str, request: Any) -> Any:
        """Store a submission and plan its notification emails."""
        pass

    @abstractmethod
    def list_submissions(self, form_id: str, sort: Optional[str], page: int, limit: int) -> Tuple[List[Any], int]:
        """
        Page through a form's submissions.

        Returns:
            Tuple of (submissions, total count)
        """
        pass

    @abstractmethod
    def get_submission(self, submission_id: str) -> Any:
        """Get one submission."""
        pass
