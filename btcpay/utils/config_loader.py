"""
BTCPay connection configuration loader.

Values come from config/btcpay_config.yml (optional) and are overridden by
environment variables, including those loaded from a local .env file:

    BTCPAY_URL, BTCPAY_STORE_ID, BTCPAY_API_KEY, BTCPAY_TIMEOUT_SECONDS
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "btcpay_config.yml"

_ENV_OVERRIDES = {
    "base_url": "BTCPAY_URL",
    "store_id": "BTCPAY_STORE_ID",
    "api_key": "BTCPAY_API_KEY",
    "timeout_seconds": "BTCPAY_TIMEOUT_SECONDS",
}


class BTCPayConfig(BaseModel):
    base_url: str = ""
    store_id: str = ""
    api_key: str = ""
    timeout_seconds: float = Field(default=20.0, gt=0.0, le=300.0)


def load_btcpay_config(config_path: Optional[Path] = None) -> BTCPayConfig:
    """
    Load and validate the BTCPay config.

    Args:
        config_path: YAML file to read. Defaults to config/btcpay_config.yml,
            which may be absent; an explicit path must exist.

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If the merged values don't match the schema
    """
    data: Dict[str, Any] = {}
    path = config_path or DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif config_path is not None:
        raise FileNotFoundError(f"BTCPay config file not found: {config_path}")

    load_dotenv()
    for field_name, env_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value

    try:
        cfg = BTCPayConfig(**data)
        logger.info("Loaded BTCPay config for store %s", cfg.store_id or "<unset>")
        return cfg
    except ValidationError as e:
        logger.error("BTCPay config validation failed: %s", e)
        raise
