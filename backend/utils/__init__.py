"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors
from .text_helpers import slugify, strip_html

__all__ = ["handle_api_errors", "slugify", "strip_html"]
