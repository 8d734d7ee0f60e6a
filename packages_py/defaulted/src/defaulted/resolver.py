"""
Layered resolution of configuration and secrets.

Precedence, lowest first:
1. Defaults (or the bare key list for secrets)
2. The override layer named by the ENVIRONMENT selector
3. Per-key values from the environment store
"""
from typing import Any, Dict, List, Mapping, Optional, Set

from .coercion import coerce
from .environment import EnvironmentSource, get_default_source
from .errors import CoercionError, MissingKeyError, UnexpectedKeyError
from .guard import ResolvedConfig, ResolvedSecrets
from .logger import get_logger
from .sensitive import redact
from .types import ENVIRONMENT_KEY, DefaultsMap, GuardMode, KeyList, OverrideSet
from .validators import validate_defaults, validate_keys, validate_overrides

logger = get_logger()


def _scan_unexpected(overrides: OverrideSet, expected_keys: Set[str]) -> List[str]:
    # Every layer is scanned, selected or not, so typos in unused layers still fail.
    unexpected: Dict[str, None] = {}
    for layer in overrides.values():
        for key in layer:
            if key not in expected_keys:
                unexpected.setdefault(key, None)
    return list(unexpected)


def resolve_values(
    defaults: Mapping[str, Any],
    expected_keys: Set[str],
    overrides: OverrideSet,
    *,
    selector: Optional[str],
    source: EnvironmentSource,
    is_secret: bool = False
) -> Dict[str, Any]:
    """Merge the layers and validate the result.

    Coercion failures raise immediately. Unexpected override keys and
    missing values are collected and reported once, after every key has
    been visited, with unexpected keys taking priority.
    """
    mode = GuardMode.SECRETS if is_secret else GuardMode.CONFIG
    kind = mode.value
    unexpected_keys = _scan_unexpected(overrides, expected_keys)

    working: Dict[str, Any] = dict(defaults)

    if selector:
        layer = overrides.get(selector)
        if layer is not None:
            logger.debug(f"Applying {kind} override layer '{selector}' ({len(layer)} keys)")
            working.update(layer)
        else:
            logger.debug(f"No {kind} override layer for '{selector}'")

    missing_keys: List[str] = []
    for key in working:
        raw = source.get(key)
        if raw is not None:
            try:
                working[key] = coerce(key, raw, defaults.get(key))
            except CoercionError:
                logger.error(f"Cannot coerce {kind} key '{key}' = {redact(key, raw, mode)}")
                raise
            logger.debug(f"ENV SET: {key} = {redact(key, working[key], mode)}")
        else:
            logger.trace(f"ENV SKIP: {key} (not set)")

        if working[key] is None:
            missing_keys.append(key)

    if unexpected_keys:
        logger.error(f"Unexpected {kind} keys in overrides: {unexpected_keys}")
        raise UnexpectedKeyError(unexpected_keys, is_secret)
    if missing_keys:
        logger.error(f"Missing {kind} keys: {missing_keys}")
        raise MissingKeyError(missing_keys, is_secret)

    return working


def build_config(
    defaults: DefaultsMap,
    overrides: Optional[OverrideSet] = None,
    source: Optional[EnvironmentSource] = None
) -> ResolvedConfig:
    """Build a typed, read-only config.

    Args:
        defaults: Name -> default value. The type of each default decides how
            an environment string for that name is coerced.
        overrides: Selector -> partial defaults, applied when ENVIRONMENT matches.
            A value of None unsets the default so the environment must supply it.
        source: Environment store to read from (defaults to ``os.environ``).
    """
    validate_defaults(defaults)
    overrides = overrides if overrides is not None else {}
    validate_overrides(overrides)
    if source is None:
        source = get_default_source()

    selector = source.get(ENVIRONMENT_KEY)
    logger.debug(f"Resolving config: {len(defaults)} keys, {ENVIRONMENT_KEY}={selector!r}")

    values = resolve_values(
        defaults,
        set(defaults),
        overrides,
        selector=selector,
        source=source,
        is_secret=False,
    )

    # Set last so it never takes part in validation or coercion.
    values[ENVIRONMENT_KEY] = selector

    logger.info(f"Config resolved ({len(values)} keys)")
    return ResolvedConfig(values)


def build_secrets(
    keys: KeyList,
    overrides: Optional[OverrideSet] = None,
    source: Optional[EnvironmentSource] = None
) -> ResolvedSecrets:
    """Build a read-only secrets object.

    Every listed key is mandatory and string valued. ``overrides`` may supply
    per-ENVIRONMENT values (e.g. a harmless token for local development).
    """
    names = validate_keys(keys)
    overrides = overrides if overrides is not None else {}
    validate_overrides(overrides, strings_only=True)
    if source is None:
        source = get_default_source()

    selector = source.get(ENVIRONMENT_KEY)
    logger.debug(f"Resolving secrets: {len(names)} keys, {ENVIRONMENT_KEY}={selector!r}")

    values = resolve_values(
        dict.fromkeys(names),
        set(names),
        overrides,
        selector=selector,
        source=source,
        is_secret=True,
    )

    logger.info(f"Secrets resolved ({len(values)} keys)")
    return ResolvedSecrets(values)


# Short aliases.
defaulted = build_config
secrets = build_secrets
