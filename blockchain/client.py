"""
Blockchain Client
Builds the Web3 handle used for deployments
"""

from web3 import Web3
from loguru import logger


def create_client(url: str) -> Web3:
    """
    Create a Web3 client bound to an HTTP node endpoint

    Args:
        url: Node RPC URL, used as given

    Returns:
        Web3 instance
    """
    w3 = Web3(Web3.HTTPProvider(url))
    logger.debug(f"Web3 client created for {url}")
    return w3
