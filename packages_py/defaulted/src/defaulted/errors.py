from typing import Iterable, Tuple

from .types import GuardMode


def _quote_keys(keys: Iterable[str]) -> str:
    return '"' + '","'.join(keys) + '"'


class DefaultedError(Exception):
    """Base exception for configuration resolution errors."""
    pass


class InvalidDefaultsError(DefaultedError):
    """Raised when defaults, overrides or key lists have the wrong shape."""
    pass


class CoercionError(DefaultedError):
    def __init__(self, key: str, raw: str, target: str):
        msg = f'Cannot cast to {target} from "{raw}" (key: "{key}")'
        super().__init__(msg)
        self.key = key
        self.raw = raw
        self.target = target


class UnexpectedKeyError(DefaultedError):
    def __init__(self, keys: Iterable[str], is_secret: bool = False):
        self.keys: Tuple[str, ...] = tuple(keys)
        self.is_secret = is_secret
        kind = "secret keys" if is_secret else "keys"
        super().__init__(f"Unexpected {kind} in overrides: {_quote_keys(self.keys)}")


class MissingKeyError(DefaultedError):
    def __init__(self, keys: Iterable[str], is_secret: bool = False):
        self.keys: Tuple[str, ...] = tuple(keys)
        self.is_secret = is_secret
        kind = "secret keys" if is_secret else "keys"
        super().__init__(f"Required {kind} not present in env: {_quote_keys(self.keys)}")


class AccessError(DefaultedError, LookupError):
    """Raised on reads of undeclared keys and on every write."""

    READ = 'read'
    WRITE = 'write'

    def __init__(self, key: object, mode: GuardMode, operation: str = READ):
        if operation == self.WRITE:
            msg = f'Cannot assign to read only property on {mode.value}: "{key}"'
        else:
            msg = f'Cannot read unspecified property on {mode.value}: "{key}"'
        super().__init__(msg)
        self.key = key
        self.mode = mode
        self.operation = operation


class SerializationError(DefaultedError):
    def __init__(self, msg: str = "Cannot serialize secrets"):
        super().__init__(msg)
