# config.py
# Generation options, buildable from the selection UI's option payload.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import MalformedInputError

__all__ = ["GenerateConfig", "DEFAULT_CHECK_INTERVAL"]

DEFAULT_CHECK_INTERVAL = 1024

# UI key -> field name
_KEY_ALIASES = {
    "onlyOpenSections": "only_open",
    "only_open": "only_open",
    "selectedCampus": "campus",
    "campus": "campus",
    "strictCampus": "strict_campus",
    "strict_campus": "strict_campus",
    "checkInterval": "check_interval",
    "check_interval": "check_interval",
}


@dataclass(frozen=True)
class GenerateConfig:
    # Section filtering
    only_open: bool = True
    campus: Optional[str] = None        # None or "" means any campus
    strict_campus: bool = False         # True: no sections at campus is a hard failure

    # Cancellation polling, in visited search nodes
    check_interval: int = DEFAULT_CHECK_INTERVAL

    def __post_init__(self):
        if not isinstance(self.check_interval, int) or self.check_interval <= 0:
            raise MalformedInputError(f"check_interval must be a positive int, got {self.check_interval!r}")

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "GenerateConfig":
        # camelCase or snake_case keys; anything unrecognised is ignored.
        kwargs: dict = {}
        for key, value in (options or {}).items():
            name = _KEY_ALIASES.get(key)
            if name is None:
                continue
            if name in ("only_open", "strict_campus") and not isinstance(value, bool):
                raise MalformedInputError(f"{key} must be a boolean, got {value!r}")
            if name == "campus" and value is not None and not isinstance(value, str):
                raise MalformedInputError(f"{key} must be a string, got {value!r}")
            kwargs[name] = value
        return cls(**kwargs)

    @property
    def campus_filter(self) -> Optional[str]:
        return (self.campus or "").strip() or None
