# Area: Shared
# PRD: docs/prd-hilo-client.md
"""
hilo_client._runner_config — Runner Configuration
=================================================

Configuration model, defaults and validation for HiLoRunner.

Sources, lowest to highest precedence:
    1. JSON config file (--config)
    2. Environment variables (HILO_*, also read from .env)
    3. CLI flags
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger("hilo_client")

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_CONTRACTS_OUT = str(Path("..") / "contract" / "out")
DEFAULT_LOG_FILE = "hilo_client.log"

# Environment variable -> config key
ENV_MAPPINGS = {
    "HILO_PRIVATE_KEY": "private_key",
    "HILO_VARIANT": "variant",
    "HILO_RPC_URL": "rpc_url",
    "HILO_CONTRACTS_OUT": "contracts_out",
    "HILO_POLL_INTERVAL_SECONDS": "poll_interval_seconds",
    "HILO_LOG_FILE": "log_file",
}


class ClientConfig(BaseModel):
    """Validated settings for one client instance."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    seat: int = Field(ge=0, le=1)
    private_key: str = Field(min_length=1)
    variant: Literal["cards", "dice"] = "dice"
    rpc_url: str = DEFAULT_RPC_URL
    contracts_out: str = DEFAULT_CONTRACTS_OUT
    poll_interval_seconds: float = Field(default=1.0, gt=0)
    log_file: str = DEFAULT_LOG_FILE
    demo: bool = False
    verbose: bool = False

    @field_validator("private_key")
    @classmethod
    def _normalize_private_key(cls, value: str) -> str:
        key = value.strip()
        if key.startswith(("0x", "0X")):
            key = key[2:]
        if len(key) != 64:
            raise ValueError("private key must be 32 bytes of hex")
        try:
            int(key, 16)
        except ValueError:
            raise ValueError("private key must be hex") from None
        return "0x" + key.lower()


class ListenerConfig(BaseModel):
    """Validated settings for the event listener."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    variant: Literal["cards", "dice"] = "dice"
    rpc_url: str = DEFAULT_RPC_URL
    contracts_out: str = DEFAULT_CONTRACTS_OUT
    poll_interval_seconds: float = Field(default=1.0, gt=0)


def load_config_sources(
    config_path: Optional[str],
    environ: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Merge the JSON config file and HILO_* environment variables.

    Args:
        config_path: Optional path to a JSON config file
        environ: Environment to read (defaults to os.environ)

    Raises:
        ConfigurationError: If the config file exists but cannot be parsed
    """
    config: Dict[str, Any] = {}
    environ = os.environ if environ is None else environ

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    config = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigurationError(f"Could not read config file {path}: {e}") from e
            if not isinstance(config, dict):
                raise ConfigurationError(f"Config file {path} is not a JSON object")
        else:
            logger.warning(f"Config file not found: {path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if environ.get(env_key):
            config[config_key] = environ[env_key]

    return config


def build_config(model: type, values: Dict[str, Any]):
    """
    Validate merged settings into a config model.

    Raises:
        ConfigurationError: Listing every invalid field
    """
    try:
        return model(**values)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError("Invalid configuration", problems=problems) from None
