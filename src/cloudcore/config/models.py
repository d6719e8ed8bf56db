"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, ``cloudcore.toml`` only carries
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cloudcore.domain.strings import StringCasing


class ApiConfig(BaseModel):
    """[api] section — HTTP client behaviour."""

    model_config = {"frozen": True}

    retry_attempts: int = Field(default=3, ge=0)
    retry_backoff_base: float = Field(default=3.0, ge=0)
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = "cloudcore"


class MonitorConfig(BaseModel):
    """[monitor] section — background running-time ticker."""

    model_config = {"frozen": True}

    frequency_seconds: float = Field(default=60, gt=0)


class TemplateConfig(BaseModel):
    """[templates] section — file template lookup and placeholder syntax."""

    model_config = {"frozen": True}

    directory: str | None = None
    start_delimiter: str = "{{"
    end_delimiter: str = "}}"
    strict: bool = False


class FlattenConfig(BaseModel):
    """[flatten] section — defaults for object flattening."""

    model_config = {"frozen": True}

    key_delimiter: str = ":"
    key_casing: StringCasing = StringCasing.UNCHANGED
    mask_sensitive: bool = False
