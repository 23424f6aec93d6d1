"""
Helper Context
Shared deployment context passed explicitly to deployment helpers
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/deploy_config.json"

DEFAULT_SETTINGS = {
    'artifact_path': "build/contracts/RelayHub.json",
    'relay_hub_address': None,
    'gas_buffer': 1.2,
    'default_gas_limit': 6000000,
    'receipt_timeout': 120
}


@dataclass(frozen=True)
class HelperContext:
    """Web3 client plus the settings deployment helpers need"""

    w3: Web3
    artifact_path: str
    relay_hub_address: Optional[str]
    gas_buffer: float
    default_gas_limit: int
    receipt_timeout: int


def load_settings(config_path: str = DEFAULT_CONFIG_PATH) -> Dict:
    """
    Resolve deployment settings

    Defaults are overridden by the JSON file (if present), which is
    overridden by environment variables.

    Args:
        config_path: Path to JSON settings file

    Returns:
        Settings dict
    """
    settings = dict(DEFAULT_SETTINGS)

    if os.path.exists(config_path):
        with open(config_path, 'r') as f:
            file_settings = json.load(f)
        settings.update({
            key: value for key, value in file_settings.items()
            if key in DEFAULT_SETTINGS
        })
        logger.debug(f"Loaded deployment settings from {config_path}")

    artifact_path = os.getenv('RELAY_HUB_ARTIFACT')
    if artifact_path:
        settings['artifact_path'] = artifact_path

    hub_address = os.getenv('RELAY_HUB_ADDRESS')
    if hub_address:
        settings['relay_hub_address'] = hub_address

    gas_limit = os.getenv('RELAY_HUB_GAS_LIMIT')
    if gas_limit:
        settings['default_gas_limit'] = int(gas_limit)

    receipt_timeout = os.getenv('RELAY_HUB_RECEIPT_TIMEOUT')
    if receipt_timeout:
        settings['receipt_timeout'] = int(receipt_timeout)

    return settings


def configure(w3: Web3, config_path: str = DEFAULT_CONFIG_PATH) -> HelperContext:
    """
    Build the helper context for a Web3 client

    Args:
        w3: Web3 instance
        config_path: Path to JSON settings file

    Returns:
        HelperContext bound to w3
    """
    settings = load_settings(config_path)

    context = HelperContext(
        w3=w3,
        artifact_path=settings['artifact_path'],
        relay_hub_address=settings['relay_hub_address'],
        gas_buffer=float(settings['gas_buffer']),
        default_gas_limit=int(settings['default_gas_limit']),
        receipt_timeout=int(settings['receipt_timeout'])
    )

    logger.info(f"Helper context configured (artifact: {context.artifact_path})")
    return context
