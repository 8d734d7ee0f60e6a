"""
Typed, read-only configuration and secrets layered from defaults,
per-environment overrides and the process environment.
"""
from .types import ENVIRONMENT_KEY, GuardMode, TargetType, target_type_of
from .errors import (
    DefaultedError,
    InvalidDefaultsError,
    CoercionError,
    UnexpectedKeyError,
    MissingKeyError,
    AccessError,
    SerializationError,
)
from .environment import EnvironmentSource, OsEnvironSource, MappingSource, get_default_source
from .coercion import coerce, parse_bool, parse_number
from .guard import AccessGuard, ResolvedConfig, ResolvedSecrets
from .resolver import build_config, build_secrets, defaulted, resolve_values, secrets
from .logger import DefaultedLogger, get_logger, set_log_level, get_log_level
from .sensitive import REDACTED, is_credential_key, redact, set_log_mask

__all__ = [
    "ENVIRONMENT_KEY",
    "GuardMode",
    "TargetType",
    "target_type_of",
    "DefaultedError",
    "InvalidDefaultsError",
    "CoercionError",
    "UnexpectedKeyError",
    "MissingKeyError",
    "AccessError",
    "SerializationError",
    "EnvironmentSource",
    "OsEnvironSource",
    "MappingSource",
    "get_default_source",
    "coerce",
    "parse_bool",
    "parse_number",
    "AccessGuard",
    "ResolvedConfig",
    "ResolvedSecrets",
    "build_config",
    "build_secrets",
    "defaulted",
    "secrets",
    "resolve_values",
    "DefaultedLogger",
    "get_logger",
    "set_log_level",
    "get_log_level",
    "REDACTED",
    "is_credential_key",
    "redact",
    "set_log_mask",
]
