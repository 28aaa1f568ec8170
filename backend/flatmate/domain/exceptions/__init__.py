"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain/application logic and caught by the
presentation layer, which maps them to HTTP status codes.
ExternalServiceError never reaches HTTP: it is carried inside Err results.
"""

from flatmate.domain.exceptions.entity_not_found import EntityNotFoundError
from flatmate.domain.exceptions.access_denied import AccessDeniedError
from flatmate.domain.exceptions.validation_error import DomainValidationError
from flatmate.domain.exceptions.external_service_error import ExternalServiceError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "ExternalServiceError",
]
