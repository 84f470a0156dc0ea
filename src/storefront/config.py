"""Application settings."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings for one ``App``.

    ``host``, ``port`` and ``log_level`` are handed to uvicorn by
    ``App.run()``. ``debug`` puts exception text in 500 bodies and logs
    unreachable bindings at startup. Resources mount under
    ``f"{api_prefix}/<resource>"``.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"
    api_prefix: str = "/api/v1"
