"""
Shared types for layered configuration resolution.
"""
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union

Scalar = Union[str, int, float, bool]
DefaultsMap = Mapping[str, Scalar]
OverrideLayer = Mapping[str, Optional[Scalar]]
OverrideSet = Mapping[str, OverrideLayer]
KeyList = Sequence[str]

# Reserved selector variable; also inserted into every resolved config.
ENVIRONMENT_KEY = "ENVIRONMENT"


class GuardMode(Enum):
    CONFIG = 'config'
    SECRETS = 'secrets'


class TargetType(Enum):
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    STRING = 'string'


def target_type_of(default: Any) -> TargetType:
    """Coercion target implied by a default value.

    bool must be tested first since it is a subclass of int.
    """
    if isinstance(default, bool):
        return TargetType.BOOLEAN
    if isinstance(default, (int, float)):
        return TargetType.NUMBER
    return TargetType.STRING
