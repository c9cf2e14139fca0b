"""
Data Transfer Objects (DTOs) Layer

Routers accept request DTOs and return response DTOs; ORM models stay
inside services and repositories.

Structure:
- request/: bodies accepted by the CMS and public endpoints
- response/: shapes returned to API clients
- internal/: values passed between services (not serialized to clients)
"""
