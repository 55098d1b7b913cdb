"""
Client settings loaded from environment variables.

Only DandhClient.from_env() reads these; the builders and the response
parser never touch the environment.
"""

import os
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigurationError
from .transport import DEFAULT_TIMEOUT, TRANSPORTS
from .xml_builders.templates import DEFAULT_ENDPOINT_URL

TRUE_VALUES = ("1", "true", "yes", "on")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Read client settings.

    Variables:
        DANDH_USERCODE / DANDH_PASSWORD: account login (required)
        DANDH_DROPSHIP_PASSWORD: enables drop ship mode when set
        DANDH_ENDPOINT_URL: dispatcher URL
        DANDH_TIMEOUT: HTTP timeout in seconds
        DANDH_SUBMISSION_MODE: 'post' or 'form'
        DANDH_STRICT: reject orders missing required fields before sending

    Raises:
        ConfigurationError: If a required variable is missing or a value is invalid
    """
    env = os.environ if environ is None else environ

    usercode = env.get("DANDH_USERCODE")
    password = env.get("DANDH_PASSWORD")
    if not usercode or not password:
        raise ConfigurationError("DANDH_USERCODE and DANDH_PASSWORD must be set")

    timeout_raw = env.get("DANDH_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(timeout_raw)
    except ValueError:
        raise ConfigurationError(f"DANDH_TIMEOUT must be a number, got {timeout_raw!r}")
    if timeout <= 0:
        raise ConfigurationError(f"DANDH_TIMEOUT must be positive, got {timeout_raw!r}")

    submission_mode = env.get("DANDH_SUBMISSION_MODE", "post").strip().lower()
    if submission_mode not in TRANSPORTS:
        supported = ", ".join(TRANSPORTS.keys())
        raise ConfigurationError(
            f"DANDH_SUBMISSION_MODE must be one of: {supported}, got {submission_mode!r}"
        )

    return {
        "usercode": usercode,
        "password": password,
        "dropship_password": env.get("DANDH_DROPSHIP_PASSWORD") or None,
        "endpoint_url": env.get("DANDH_ENDPOINT_URL", DEFAULT_ENDPOINT_URL),
        "timeout": timeout,
        "submission_mode": submission_mode,
        "strict": env.get("DANDH_STRICT", "false").strip().lower() in TRUE_VALUES,
    }
