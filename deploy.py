"""
RelayHub Deployment
Command-line entry point for deploying RelayHub to an Ethereum node
"""

import sys
import asyncio
from argparse import ArgumentParser
from dataclasses import dataclass
from typing import List, Optional
from loguru import logger

from blockchain.client import create_client
from blockchain.helper_context import configure
from blockchain.relay_hub_deployer import DeployOptions, deploy_relay_hub

DEFAULT_NODE_URL = 'http://localhost:8545'


@dataclass(frozen=True)
class DeploymentRequest:
    """Parsed command-line input for one deployment run"""

    node_url: str = DEFAULT_NODE_URL
    from_: Optional[str] = None


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Deploy RelayHub", allow_abbrev=False)
    parser.add_argument('--ethereumNodeURL', dest='ethereum_node_url', metavar='url')
    parser.add_argument('--from', dest='from_', metavar='account')
    return parser


def parse_request(argv: Optional[List[str]] = None) -> DeploymentRequest:
    """Parse flags into a DeploymentRequest, defaulting the node URL"""
    args = build_parser().parse_args(argv)

    node_url = args.ethereum_node_url if args.ethereum_node_url is not None else DEFAULT_NODE_URL
    return DeploymentRequest(node_url=node_url, from_=args.from_)


def setup_logging():
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="INFO"
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    request = parse_request(argv)

    setup_logging()

    w3 = create_client(request.node_url)
    context = configure(w3)
    options = DeployOptions(from_=request.from_)

    asyncio.run(deploy_relay_hub(context, options))


if __name__ == "__main__":
    main()
