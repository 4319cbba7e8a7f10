"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _flag(name: str, default: bool) -> bool:
    raw = str(os.getenv(name) or "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


class EngineSettings(BaseModel):
    round_trip: bool = Field(default=True)
    strict_validation: bool = Field(default=False)
    structured_logs: bool = Field(default=True)
    enable_docs: bool = Field(default=False)


def resolve_engine_settings() -> EngineSettings:
    return EngineSettings(
        round_trip=_flag("ECOTRIP_ROUND_TRIP", True),
        strict_validation=_flag("ECOTRIP_STRICT_VALIDATION", False),
        structured_logs=_flag("ECOTRIP_STRUCTURED_LOGS", True),
        enable_docs=_flag("ECOTRIP_ENABLE_DOCS", False),
    )


__all__ = [
    "EngineSettings",
    "resolve_engine_settings",
]
