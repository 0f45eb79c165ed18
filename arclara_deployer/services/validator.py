"""
Pre-flight validation of the deployment configuration
"""

import logging
from typing import Callable

from web3 import Web3

from arclara_deployer.config import TREASURY_PLACEHOLDER
from arclara_deployer.errors import ConfigurationError

logger = logging.getLogger('arclara_deployer')


def validate_treasury_address(treasury_address: str,
                              is_address: Callable[[str], bool] = Web3.is_address) -> str:
    """Reject the placeholder or a malformed address; returns the input unchanged"""
    if treasury_address == TREASURY_PLACEHOLDER or not is_address(treasury_address):
        logger.error(f"Invalid treasury wallet: {treasury_address!r}")
        raise ConfigurationError(
            "Please set a valid TREASURY_WALLET address before deploying!"
        )
    return treasury_address
