"""StructlogTelemetryLogger — TelemetryLogger implementation on structlog.

Every event is tagged with the calling function, file and line so log
lines point back at application code rather than at this adapter.
"""

from __future__ import annotations

import inspect
import logging
import os
from collections.abc import Mapping
from typing import Any

import structlog

Properties = Mapping[str, str]


def _caller_info(depth: int = 2) -> dict[str, Any]:
    """Describe the frame *depth* levels above the caller of this function."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return {}
        return {
            "caller": frame.f_code.co_name,
            "caller_file": os.path.basename(frame.f_code.co_filename),
            "caller_line": frame.f_lineno,
        }
    finally:
        del frame


class StructlogTelemetryLogger:
    """Structured telemetry routed through structlog's stdlib integration.

    Output format and level filtering follow
    :func:`cloudcore.config.logging.configure_logging`.
    """

    def __init__(self, name: str = "cloudcore.telemetry", **context: Any) -> None:
        self.name = name
        self._log = structlog.get_logger(name).bind(**context)

    def _emit(
        self,
        level: int,
        message: str,
        properties: Properties | None,
        exc: BaseException | None = None,
    ) -> None:
        fields: dict[str, Any] = dict(properties or {})
        fields.update(_caller_info(depth=2))
        if exc is not None:
            fields["exc_info"] = exc
        self._log.log(level, message, **fields)

    def log_verbose(self, message: str, properties: Properties | None = None) -> None:
        self._emit(logging.DEBUG, message, properties)

    def log_information(self, message: str, properties: Properties | None = None) -> None:
        self._emit(logging.INFO, message, properties)

    def log_warning(
        self, message: str | BaseException, properties: Properties | None = None
    ) -> None:
        if isinstance(message, BaseException):
            self._emit(logging.WARNING, str(message), properties, message)
        else:
            self._emit(logging.WARNING, message, properties)

    def log_error(
        self,
        error: str | BaseException,
        properties: Properties | None = None,
        *,
        message: str | None = None,
    ) -> None:
        if isinstance(error, BaseException):
            self._emit(logging.ERROR, message or str(error), properties, error)
        else:
            self._emit(logging.ERROR, error, properties)

    def log_critical(
        self, message: str | BaseException, properties: Properties | None = None
    ) -> None:
        if isinstance(message, BaseException):
            self._emit(logging.CRITICAL, str(message), properties, message)
        else:
            self._emit(logging.CRITICAL, message, properties)

    def log_metric(
        self, metric_name: str, metric_value: float, properties: Properties | None = None
    ) -> None:
        fields: dict[str, Any] = dict(properties or {})
        fields.update(_caller_info(depth=1))
        self._log.info("metric", metric=metric_name, value=metric_value, **fields)

    def flush(self) -> None:
        """Flush every handler attached to the root logger."""
        for handler in logging.getLogger().handlers:
            handler.flush()
