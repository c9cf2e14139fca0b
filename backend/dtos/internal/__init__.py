"""
Internal DTOs

Plain dataclasses exchanged inside the backend, currently the notification
plan built for each form submission.
"""

from .notification_dto import EmailNotification, NotificationPlan

__all__ = ["EmailNotification", "NotificationPlan"]
