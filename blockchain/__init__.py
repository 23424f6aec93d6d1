"""
Blockchain Interaction Package
Handles client construction, helper context, and RelayHub deployment
"""

from .client import create_client
from .helper_context import HelperContext, configure
from .relay_hub_deployer import DeployOptions, DeploymentResult, DeploymentError, deploy_relay_hub

__all__ = [
    'create_client',
    'HelperContext',
    'configure',
    'DeployOptions',
    'DeploymentResult',
    'DeploymentError',
    'deploy_relay_hub'
]
