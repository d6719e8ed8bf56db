"""Exception types raised across cloudcore.

All errors derive from :class:`CloudCoreError` so callers can catch the
library's failures in one place.  Each carries the structured fields the
raising operation knows about, alongside the human message.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cloudcore.services.validation import ValidateResult


class CloudCoreError(Exception):
    """Base class for cloudcore errors."""


class ConflictError(CloudCoreError):
    """An entity already exists or is in a conflicting state."""

    def __init__(self, message: str = "Conflicting entity state") -> None:
        super().__init__(message)


class EntityDisabledError(CloudCoreError):
    """An operation targeted an entity that is disabled."""

    def __init__(self, entity_name: str, message: str | None = None) -> None:
        super().__init__(message or f"Entity {entity_name} is disabled")
        self.entity_name = entity_name


class EntityFullError(CloudCoreError):
    """An entity has reached its storage capacity."""

    def __init__(
        self,
        entity_name: str,
        message: str | None = None,
        *,
        current_size_bytes: int = 0,
        max_size_bytes: int = 0,
    ) -> None:
        super().__init__(message or f"Entity {entity_name} is full")
        self.entity_name = entity_name
        self.current_size_bytes = current_size_bytes
        self.max_size_bytes = max_size_bytes

    @property
    def percent_used(self) -> float:
        """Used capacity as a percentage; ``0`` when the maximum is unknown."""
        if self.max_size_bytes <= 0:
            return 0.0
        return self.current_size_bytes / self.max_size_bytes * 100


class RequestFailedError(CloudCoreError):
    """An HTTP request completed with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
        request_object: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.request_object = request_object


class TemplateMappingError(CloudCoreError):
    """A template could not be found or its placeholders could not be mapped."""

    def __init__(
        self,
        message: str,
        *,
        template_id: str | None = None,
        template_found: bool = False,
        template_keys: Sequence[str] = (),
        model_key_values: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.template_id = template_id
        self.template_found = template_found
        self.template_keys = list(template_keys)
        self.model_key_values = dict(model_key_values or {})


class ValidateError(CloudCoreError):
    """Raised by :meth:`AttributeValidator.throw_if_invalid`."""

    def __init__(self, result: ValidateResult, message: str = "Validation failed") -> None:
        details = "; ".join(str(e) for e in result.errors)
        super().__init__(f"{message}: {details}" if details else message)
        self.result = result

    @property
    def errors(self) -> list[Any]:
        return list(self.result.errors)
