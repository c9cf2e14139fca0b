"""
Application-wide constants and enumerations.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum


class FormFieldType(str, Enum):
    """
    Input types a form field can render as.

    The frontend form renderer switches on these values, so they are stored
    verbatim in the form_fields.field_type column.
    """

    TEXT = 'text'
    EMAIL = 'email'
    NUMBER = 'number'
    PASSWORD = 'password'
    DATE = 'date'
    CHECKBOX = 'checkbox'
    DROPDOWN = 'dropdown'
    CHECKBOX_GROUP = 'checkboxgroup'
    RADIO = 'radio'
    RADIO_GROUP = 'radiogroup'
    TEXTAREA = 'textarea'
    TEXT_LIST = 'textlist'
    FILE = 'file'


class PageLanguage(str, Enum):
    """Content languages supported by forms and email contents"""

    TH = 'th'
    EN = 'en'


class ProviderType(str, Enum):
    """How a user account was created"""

    NORMAL = 'normal'
    LINE = 'line'


class FormSort(str, Enum):
    """Sort options accepted by the form list endpoint"""

    NAME_ASC = 'name_asc'
    NAME_DESC = 'name_desc'
    UPDATED_AT_ASC = 'updated_at_asc'
    UPDATED_AT_DESC = 'updated_at_desc'


class ServerConfig:
    """Route prefixes. Host and port come from config.settings"""

    API_PREFIX = "/api/v1"
    CMS_PREFIX = f"{API_PREFIX}/cms"
    APP_PREFIX = f"{API_PREFIX}/app"


class PaginationConfig:
    """Pagination defaults for list endpoints"""

    DEFAULT_PAGE = 1
    DEFAULT_ITEMS_PER_PAGE = 10
    MAX_ITEMS_PER_PAGE = 100


class SubmissionConfig:
    """Form submission listing configuration"""

    DEFAULT_SORT_COLUMN = "created_at"
    DEFAULT_SORT_DIRECTION = "desc"
    SORTABLE_COLUMNS = ("created_at", "submitted_at", "submitted_email")
    # Email contents whose label contains this marker are sent to the submitter
    USER_LABEL_MARKER = "user"


class AuthConfig:
    """Authentication constants"""

    MIN_PASSWORD_LENGTH = 6
    TOKEN_TYPE = "Bearer"
    INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class FieldLimits:
    """Column length limits shared by models and request DTOs"""

    NAME_MAX = 255
    TITLE_MIN = 3
    TITLE_MAX = 255
    DESCRIPTION_MAX = 1000
    LABEL_MAX = 255
    FIELD_KEY_MAX = 100
    PLACEHOLDER_MAX = 255
    DEFAULT_VALUE_MAX = 1000
    EMAIL_LABEL_MIN = 3
    EMAIL_LABEL_MAX = 100
    SEND_FROM_NAME_MAX = 100
    SUBJECT_MAX = 255
    LINK_MAX = 255


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
