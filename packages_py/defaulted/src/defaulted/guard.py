"""
Read-only, declared-keys-only views over resolved values.
"""
import json
import math
from types import MappingProxyType
from typing import Any, Dict, Iterator, KeysView, Mapping

from .errors import AccessError, SerializationError
from .sensitive import redact
from .types import GuardMode


def _restore_guard(cls: type, values: Dict[str, Any], mode: GuardMode) -> "AccessGuard":
    guard = cls.__new__(cls)
    AccessGuard.__init__(guard, values, mode)
    return guard


class AccessGuard:
    """Wraps a resolved value map.

    Values are read with ``guard[key]``, ``guard.get(key)`` or, for keys
    that are identifiers and do not clash with a method name, ``guard.KEY``.
    Reading a key that was never resolved raises AccessError, as does any
    write or delete. In secrets mode the values cannot be serialized.

    AccessError is a LookupError, not an AttributeError, so
    ``hasattr(guard, name)`` and ``getattr(guard, name, default)`` raise
    for undeclared non-dunder names instead of returning False or the
    default. Use
    ``name in guard`` to test for a key.
    """

    __slots__ = ("_values", "_mode")

    def __init__(self, values: Mapping[str, Any], mode: GuardMode):
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))
        object.__setattr__(self, "_mode", mode)

    @property
    def mode(self) -> GuardMode:
        return self._mode

    # --- reads ---------------------------------------------

    def __getitem__(self, key: str) -> Any:
        try:
            return self._values[key]
        except (KeyError, TypeError):
            raise AccessError(key, self._mode, AccessError.READ) from None

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name in AccessGuard.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return self[name]

    def get(self, key: str) -> Any:
        return self[key]

    # --- writes --------------------------------------------

    def __setitem__(self, key: str, value: Any) -> None:
        raise AccessError(key, self._mode, AccessError.WRITE)

    def __delitem__(self, key: str) -> None:
        raise AccessError(key, self._mode, AccessError.WRITE)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AccessError(name, self._mode, AccessError.WRITE)

    def __delattr__(self, name: str) -> None:
        raise AccessError(name, self._mode, AccessError.WRITE)

    # --- enumeration ---------------------------------------

    def keys(self) -> KeysView:
        return self._values.keys()

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._values
        except TypeError:
            return False

    # --- serialization -------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        if self._mode is GuardMode.SECRETS:
            raise SerializationError()
        return dict(self._values)

    def to_json(self, **kwargs: Any) -> str:
        """JSON object of every resolved key. Extra kwargs go to ``json.dumps``.

        Infinite and NaN numbers have no JSON form and are written as null.
        """
        values = {
            key: None if isinstance(value, float) and not math.isfinite(value) else value
            for key, value in self.to_dict().items()
        }
        return json.dumps(values, **kwargs)

    def __reduce_ex__(self, protocol: Any) -> Any:
        if self._mode is GuardMode.SECRETS:
            raise SerializationError()
        return (_restore_guard, (type(self), dict(self._values), self._mode))

    def __copy__(self) -> "AccessGuard":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "AccessGuard":
        return self

    def __repr__(self) -> str:
        if self._mode is GuardMode.SECRETS:
            shown = {key: redact(key, value, self._mode) for key, value in self._values.items()}
        else:
            shown = dict(self._values)
        return f"{type(self).__name__}({shown!r})"


class ResolvedConfig(AccessGuard):
    """Guarded config: typed values plus the reserved ENVIRONMENT key."""

    __slots__ = ()

    def __init__(self, values: Mapping[str, Any]):
        super().__init__(values, GuardMode.CONFIG)


class ResolvedSecrets(AccessGuard):
    """Guarded secrets: string values, never serializable."""

    __slots__ = ()

    def __init__(self, values: Mapping[str, Any]):
        super().__init__(values, GuardMode.SECRETS)
