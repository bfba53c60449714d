from __future__ import annotations

from greeter.core import errors as api_errors
from greeter.services.errors import ConflictError, NotFoundError, ServiceError


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Centralize domain -> HTTP error translation.
    * Keep services thin, orchestration-only, no web leakage.
    """

    def translate_exceptions(self, exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ConflictError):
            return api_errors.Conflict(str(exc))

        # Any other ServiceError subclass -> 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

        # Fallback: return untouched (bubbles up to the Flask handler)
        return exc
