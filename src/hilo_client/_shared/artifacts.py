# Area: Shared
# PRD: docs/prd-hilo-client.md
"""
hilo_client._shared.artifacts — Contract build artifacts
========================================================

Loads the contract ABI and the deployed address from the contract build
output directory:

    <contracts_out>/<Contract>.sol/<Contract>.json   {"abi": [...]}
    <contracts_out>/deployment.json                  {"gameAddress": "0x..."}
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from ..errors import ConfigurationError

logger = logging.getLogger("hilo_client.artifacts")

DEPLOYMENT_FILE = "deployment.json"


@dataclass(frozen=True)
class ContractArtifacts:
    """ABI and address of one deployed HiLo contract."""
    contract_name: str
    abi: List[Dict[str, Any]]
    address: str


def abi_path(contracts_out: Union[str, Path], contract_name: str) -> Path:
    return Path(contracts_out) / f"{contract_name}.sol" / f"{contract_name}.json"


def deployment_path(contracts_out: Union[str, Path]) -> Path:
    return Path(contracts_out) / DEPLOYMENT_FILE


def load_artifacts(contracts_out: Union[str, Path], contract_name: str) -> ContractArtifacts:
    """
    Load ABI and address for a contract.

    Args:
        contracts_out: Contract build output directory
        contract_name: e.g. "HiLoDice"

    Returns:
        ContractArtifacts

    Raises:
        ConfigurationError: If a file is missing, unreadable or lacks its key
    """
    abi_json = _read_json(abi_path(contracts_out, contract_name))
    deploy_json = _read_json(deployment_path(contracts_out))

    abi = abi_json.get("abi")
    if not isinstance(abi, list):
        raise ConfigurationError(
            f"No ABI in {abi_path(contracts_out, contract_name)}",
            problems=["expected a list under key 'abi'"],
        )

    address = deploy_json.get("gameAddress")
    if not isinstance(address, str) or not address:
        raise ConfigurationError(
            f"No game address in {deployment_path(contracts_out)}",
            problems=["expected a string under key 'gameAddress'"],
        )

    logger.debug(f"Loaded {contract_name} artifacts (address {address})")
    return ContractArtifacts(contract_name=contract_name, abi=abi, address=address)


def _read_json(path: Path) -> Dict[str, Any]:
    """Read a JSON object from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Contract artifact not found: {path}") from None
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read contract artifact {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Contract artifact {path} is not a JSON object")
    return data
