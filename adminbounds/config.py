"""
Load fetch settings from the environment (and a .env file, if present).
"""

import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from adminbounds.models import FetchSettings

# Environment variable -> FetchSettings field
ENV_MAPPINGS = {
    "OVERPASS_URL": "endpoint",
    "ADMINBOUNDS_OUT_DIR": "out_dir",
    "OVERPASS_TIMEOUT": "timeout",
}


def load_settings(
    overrides: Optional[Dict[str, Any]] = None, use_dotenv: bool = True
) -> FetchSettings:
    """
    Build FetchSettings from defaults, environment variables and explicit overrides.

    Precedence (lowest to highest): model defaults, environment / .env,
    `overrides`. Override values of None are ignored so argparse defaults
    can be passed straight through.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    values: Dict[str, Any] = {}
    for env_var, field in ENV_MAPPINGS.items():
        env_value = os.getenv(env_var)
        if env_value:
            logger.debug(f"Using {env_var} for setting '{field}'")
            values[field] = env_value

    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    return FetchSettings(**values)
