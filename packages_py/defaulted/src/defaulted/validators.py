from typing import Any, Dict, List, Optional, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from .errors import InvalidDefaultsError

_ScalarField = Union[StrictBool, StrictInt, StrictFloat, StrictStr]

_DEFAULTS_ADAPTER = TypeAdapter(Dict[StrictStr, _ScalarField])
_OVERRIDES_ADAPTER = TypeAdapter(Dict[StrictStr, Dict[StrictStr, Optional[_ScalarField]]])
_SECRET_OVERRIDES_ADAPTER = TypeAdapter(Dict[StrictStr, Dict[StrictStr, Optional[StrictStr]]])
_KEYS_ADAPTER = TypeAdapter(List[StrictStr])


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validate_defaults(defaults: Any) -> None:
    """Defaults must map string names to str, int, float or bool values."""
    try:
        _DEFAULTS_ADAPTER.validate_python(defaults)
    except ValidationError as e:
        raise InvalidDefaultsError(f"Invalid defaults: {_describe(e)}") from e


def validate_overrides(overrides: Any, strings_only: bool = False) -> None:
    """Each override layer maps names to a scalar or None (explicitly unset).

    Secret layers pass ``strings_only`` since secrets are always strings.
    """
    adapter = _SECRET_OVERRIDES_ADAPTER if strings_only else _OVERRIDES_ADAPTER
    try:
        adapter.validate_python(overrides)
    except ValidationError as e:
        raise InvalidDefaultsError(f"Invalid overrides: {_describe(e)}") from e


def validate_keys(keys: Any) -> List[str]:
    """Validate a secret key list and drop repeated names, keeping first-seen order."""
    try:
        names = _KEYS_ADAPTER.validate_python(keys)
    except ValidationError as e:
        raise InvalidDefaultsError(f"Invalid secret keys: {_describe(e)}") from e
    return list(dict.fromkeys(names))
