from __future__ import annotations
import os
from dataclasses import dataclass, field
from functools import lru_cache

def _env(name: str, default=None, cast=str):
    val = os.getenv(name, default)
    if val is None:
        return None
    if cast is bool:
        return str(val).strip().lower() in {"1", "true", "yes", "on"}
    if cast in (int, float):
        try:
            return cast(val)
        except Exception:
            return cast(default) if default is not None else None
    return str(val)

@dataclass(frozen=True)
class ApiConfig:
    host: str = _env("XMLGW_API_HOST", "0.0.0.0")
    port: int = _env("XMLGW_API_PORT", 3000, int)
    debug: bool = _env("XMLGW_DEBUG", False, bool)

@dataclass(frozen=True)
class LimitsConfig:
    #requests above this size are rejected with 413 before parsing
    max_request_mb: int = _env("XMLGW_MAX_REQUEST_MB", 5, int)

    @property
    def max_request_bytes(self) -> int:
        return self.max_request_mb * 1048576

@dataclass(frozen=True)
class LoggingConfig:
    level: str = _env("XMLGW_LOG_LEVEL", "INFO")

@dataclass(frozen=True)
class AppConfig:
    api: "ApiConfig" = field(default_factory=lambda: ApiConfig())
    limits: "LimitsConfig" = field(default_factory=lambda: LimitsConfig())
    logging: "LoggingConfig" = field(default_factory=lambda: LoggingConfig())

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig()

