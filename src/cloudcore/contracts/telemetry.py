"""Telemetry and audit logging contracts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

Properties = Mapping[str, str]


@runtime_checkable
class TelemetryLogger(Protocol):
    """Structured application telemetry.

    The ``log_warning``, ``log_error`` and ``log_critical`` methods accept
    either a message or an exception; ``log_error`` also takes an explicit
    *message* to accompany an exception.
    """

    def log_verbose(self, message: str, properties: Properties | None = None) -> None: ...

    def log_information(self, message: str, properties: Properties | None = None) -> None: ...

    def log_warning(
        self, message: str | BaseException, properties: Properties | None = None
    ) -> None: ...

    def log_error(
        self,
        error: str | BaseException,
        properties: Properties | None = None,
        *,
        message: str | None = None,
    ) -> None: ...

    def log_critical(
        self, message: str | BaseException, properties: Properties | None = None
    ) -> None: ...

    def log_metric(
        self, metric_name: str, metric_value: float, properties: Properties | None = None
    ) -> None: ...

    def flush(self) -> None: ...


@runtime_checkable
class AuditLogger(Protocol):
    """Append-only audit trail of user and system actions."""

    async def write_log(
        self,
        event_name: str,
        message: str,
        *,
        user_identifier: str | None = None,
        source: str | None = None,
        previous_value: Any = None,
        current_value: Any = None,
    ) -> None: ...
