"""
Redaction of resolved values in log lines and reprs.

Every value of a secrets object is redacted. A config value is redacted
when its key names a credential, unless DEFAULTED_LOG_MASK=false.
"""
import os
import re
from typing import Any

from .types import GuardMode

REDACTED = '[REDACTED]'

# Config keys that carry credentials even though they were given defaults.
_CREDENTIAL_KEY = re.compile(r'KEY|SECRET|PASSWORD|TOKEN|CREDENTIAL|AUTH|PRIVATE', re.IGNORECASE)

_mask_config = os.getenv('DEFAULTED_LOG_MASK', '').lower() != 'false'


def set_log_mask(enabled: bool) -> None:
    """Toggle redaction of credential-named config keys. Secrets stay redacted."""
    global _mask_config
    _mask_config = enabled


def is_credential_key(key: str) -> bool:
    return _CREDENTIAL_KEY.search(key) is not None


def redact(key: str, value: Any, mode: GuardMode = GuardMode.CONFIG) -> str:
    if mode is GuardMode.SECRETS:
        return REDACTED
    text = str(value)
    if _mask_config and text and is_credential_key(key):
        return REDACTED
    return text
