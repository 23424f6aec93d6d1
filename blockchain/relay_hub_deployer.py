"""
RelayHub Deployer
Deploys the RelayHub contract through a node-managed account
"""

import json
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, List
from web3 import Web3
from loguru import logger

from .helper_context import HelperContext


class DeploymentError(Exception):
    """Raised when the RelayHub cannot be deployed"""


@dataclass(frozen=True)
class DeployOptions:
    """Options forwarded to the deployment routine"""

    from_: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        """Transaction params carrying only the options that were set"""
        if self.from_ is None:
            return {}
        return {'from': self.from_}


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a RelayHub deployment"""

    address: str
    deployer: Optional[str]
    tx_hash: Optional[str] = None
    gas_used: int = 0
    already_deployed: bool = False


async def deploy_relay_hub(context: HelperContext, options: DeployOptions) -> DeploymentResult:
    """
    Deploy RelayHub unless it is already live at the configured address

    Args:
        context: Helper context with Web3 client and settings
        options: Deployment options (sender account)

    Returns:
        DeploymentResult
    """
    w3 = context.w3

    existing = _find_existing_hub(context)
    if existing:
        logger.info(f"RelayHub already deployed at {existing}")
        return DeploymentResult(
            address=existing,
            deployer=None,
            already_deployed=True
        )

    deployer = _resolve_deployer(w3, options)
    logger.info(f"Deploying RelayHub from: {deployer}")

    balance = w3.eth.get_balance(deployer)
    logger.info(f"Deployer balance: {w3.from_wei(balance, 'ether')} ETH")

    abi, bytecode = _load_artifact(context.artifact_path)
    RelayHub = w3.eth.contract(abi=abi, bytecode=bytecode)

    gas_limit = _estimate_gas_limit(RelayHub, deployer, context)
    logger.info(f"Gas limit: {gas_limit}")

    tx_hash = RelayHub.constructor().transact({
        'from': deployer,
        'gas': gas_limit
    })
    logger.info(f"Transaction sent: {tx_hash.hex()}")
    logger.info("Waiting for confirmation...")

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=context.receipt_timeout)

    if receipt['status'] != 1:
        logger.error(f"RelayHub deployment reverted: {tx_hash.hex()}")
        raise DeploymentError(f"RelayHub deployment transaction {tx_hash.hex()} reverted")

    result = DeploymentResult(
        address=receipt['contractAddress'],
        deployer=deployer,
        tx_hash=tx_hash.hex(),
        gas_used=receipt['gasUsed']
    )

    logger.success(f"RelayHub deployed at {result.address}")
    logger.success(f"Gas used: {result.gas_used}")
    return result


def _find_existing_hub(context: HelperContext) -> Optional[str]:
    """Return the configured hub address if it already holds code"""
    if not context.relay_hub_address:
        return None

    address = Web3.to_checksum_address(context.relay_hub_address)
    code = context.w3.eth.get_code(address)

    if len(code) == 0:
        logger.debug(f"No code at {address}, deploying a new RelayHub")
        return None

    return address


def _resolve_deployer(w3: Web3, options: DeployOptions) -> str:
    """Pick the sender: explicit option first, then the node's first account"""
    params = options.as_dict()

    if 'from' in params:
        try:
            return Web3.to_checksum_address(params['from'])
        except ValueError as e:
            logger.error(f"Invalid deployer address: {params['from']}")
            raise DeploymentError(f"Invalid deployer address {params['from']!r}") from e

    accounts = w3.eth.accounts
    if not accounts:
        logger.error("No --from given and the node manages no accounts")
        raise DeploymentError("No deployer account available")

    return accounts[0]


def _load_artifact(artifact_path: str) -> Tuple[List[Dict], str]:
    """
    Load compiled RelayHub artifact

    Args:
        artifact_path: Path to compiled contract JSON

    Returns:
        (abi, bytecode)
    """
    with open(artifact_path, 'r') as f:
        contract_json = json.load(f)

    try:
        return contract_json['abi'], contract_json['bytecode']
    except KeyError as e:
        logger.error(f"Artifact {artifact_path} is missing {e}")
        raise DeploymentError(f"Malformed artifact {artifact_path}: missing {e}") from e


def _estimate_gas_limit(contract, deployer: str, context: HelperContext) -> int:
    """Estimate constructor gas with buffer, falling back to the configured limit"""
    try:
        gas_estimate = contract.constructor().estimate_gas({'from': deployer})
        return int(gas_estimate * context.gas_buffer)
    except Exception as e:
        logger.warning(f"Gas estimation failed: {e}, using default")
        return context.default_gas_limit
