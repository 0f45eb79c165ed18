"""
Environment configuration and logging setup for the deployer
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from arclara_deployer.errors import ConfigurationError

# Treasury wallet value shipped in the example .env - MUST BE CHANGED before deploying
TREASURY_PLACEHOLDER = "0xYourTreasuryWalletAddressHere"

DEFAULT_ARTIFACT_PATH = "artifacts/contracts/ArclaraToken.sol/ArclaraToken.json"
DEFAULT_DEPLOYMENTS_DIR = "deployments"
DEFAULT_RECEIPT_TIMEOUT = 300

LOGGER_NAME = 'arclara_deployer'


@dataclass(frozen=True)
class DeployerSettings:
    """Everything the deployer reads from the environment at start-up"""
    private_key: str
    rpc_url: str
    treasury_wallet: str
    network_name: Optional[str]
    artifact_path: str
    deployments_dir: str
    receipt_timeout: int


def load_settings(env_file: Optional[str] = None) -> DeployerSettings:
    """Load configuration from environment (and .env if present)"""
    load_dotenv(env_file)

    required_vars = ['PRIVATE_KEY', 'RPC_URL']
    missing = [var for var in required_vars if not os.getenv(var)]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {missing}")

    try:
        receipt_timeout = int(os.getenv('RECEIPT_TIMEOUT', str(DEFAULT_RECEIPT_TIMEOUT)))
    except ValueError:
        raise ConfigurationError(f"RECEIPT_TIMEOUT must be an integer, got {os.getenv('RECEIPT_TIMEOUT')!r}")

    return DeployerSettings(
        private_key=os.getenv('PRIVATE_KEY'),
        rpc_url=os.getenv('RPC_URL'),
        treasury_wallet=os.getenv('TREASURY_WALLET', TREASURY_PLACEHOLDER),
        network_name=os.getenv('NETWORK_NAME'),
        artifact_path=os.getenv('ARTIFACT_PATH', DEFAULT_ARTIFACT_PATH),
        deployments_dir=os.getenv('DEPLOYMENTS_DIR', DEFAULT_DEPLOYMENTS_DIR),
        receipt_timeout=receipt_timeout,
    )


def setup_logging(log_dir: str = 'logs') -> logging.Logger:
    """Setup logging"""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    logger.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(os.path.join(log_dir, 'deployer.log'), encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    if os.getenv('DEBUG_DEPLOYER', 'false').lower() == 'true':
        console_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger
