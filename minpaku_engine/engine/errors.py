from __future__ import annotations

from typing import Any, Optional


class EngineError(ValueError):
    """Base class for every error raised by the projection engine."""


class InvalidParameterError(EngineError):
    """A parameter the engine cannot compute with (e.g. stay length <= 0)."""

    def __init__(self, field: str, value: Any, season: Optional[str] = None, reason: str = ""):
        self.field = field
        self.value = value
        self.season = season
        self.reason = reason
        where = f" ({season} season)" if season else ""
        msg = f"Invalid {field}{where}: {value!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class ConfigError(EngineError):
    """Scenario file could not be read or does not match the schema."""
