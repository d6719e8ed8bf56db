"""Infrastructure layer — HTTP, telemetry and template file adapters.

This layer depends on third-party libs (httpx, structlog, Jinja2, WeasyPrint).
It implements the protocols declared in :mod:`cloudcore.contracts`.
"""
