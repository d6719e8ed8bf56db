"""Runtime checks that concrete classes satisfy the service protocols."""

from __future__ import annotations

from cloudcore.contracts.auth import Authentication, BearerAccessToken
from cloudcore.contracts.named import NamedInstance
from cloudcore.contracts.telemetry import TelemetryLogger
from cloudcore.contracts.templates import TemplateMapper
from cloudcore.infrastructure.telemetry import StructlogTelemetryLogger
from cloudcore.infrastructure.templates import FileTemplateMapper


class StaticAuthentication:
    def __init__(self, name: str, token: str) -> None:
        self.name = name
        self._token = BearerAccessToken(bearer_token=token)

    @property
    def access_token(self) -> BearerAccessToken:
        return self._token


class TestProtocols:
    def test_named_instance(self) -> None:
        assert isinstance(StaticAuthentication("a", "t"), NamedInstance)
        assert not isinstance(object(), NamedInstance)

    def test_authentication(self) -> None:
        assert isinstance(StaticAuthentication("a", "t"), Authentication)

    def test_structlog_telemetry_logger(self) -> None:
        assert isinstance(StructlogTelemetryLogger(), TelemetryLogger)

    def test_file_template_mapper(self) -> None:
        assert isinstance(FileTemplateMapper(templates={"t": "x"}), TemplateMapper)
