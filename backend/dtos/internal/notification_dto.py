"""
Internal Notification DTOs

DTOs describing the emails a form submission should trigger.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class EmailNotification:
    """
    Internal DTO for one email derived from an email content.

    Built by FormSubmissionService after a submission is stored.
    """

    email_content_id: str
    label: str
    language: str
    subject: str
    send_from_email: str
    send_from_name: str
    recipients: List[str]
    is_user_email: bool
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class NotificationPlan:
    """
    Internal DTO for everything a submission triggers.

    skipped holds the labels of email contents that produced no email, with the reason.
    """

    submission_id: str
    email_category_id: str | None
    emails: List[EmailNotification] = field(default_factory=list)
    skipped: Dict[str, str] = field(default_factory=dict)
