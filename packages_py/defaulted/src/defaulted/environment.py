"""
Read-only environment stores consulted during resolution.
"""
import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Protocol


class EnvironmentSource(Protocol):
    """Case-sensitive string lookup. ``None`` means the name was never set."""

    def get(self, key: str) -> Optional[str]: ...


class OsEnvironSource:
    """Live view over ``os.environ``; every lookup reads the current value."""

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def __repr__(self) -> str:
        return "OsEnvironSource()"


class MappingSource:
    """Frozen snapshot of a mapping.

    Useful for tests and for hosts that assemble their own environment
    instead of exposing the whole process environment.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        snapshot: Dict[str, str] = {}
        for key, value in (values or {}).items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"Environment entries must be str -> str, got {type(key).__name__} -> {type(value).__name__}"
                )
            snapshot[key] = value
        self._values = MappingProxyType(snapshot)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MappingSource(keys={sorted(self._values)})"


# Global Accessor
_default_source = OsEnvironSource()


def get_default_source() -> EnvironmentSource:
    return _default_source
