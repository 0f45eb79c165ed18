"""
Thin async Web3 client used by the deployment pipeline
"""

import os
import json
import logging
from typing import Any, Optional

from web3 import AsyncWeb3, Web3
from eth_account import Account
from eth_utils import is_address, to_checksum_address

from arclara_deployer.config import DEFAULT_RECEIPT_TIMEOUT
from arclara_deployer.errors import ConfigurationError, DeploymentError
from arclara_deployer.models import ContractArtifact


def checksum_args(args) -> tuple:
    """Checksum any address arguments; web3 rejects lowercase or unprefixed ones"""
    return tuple(
        to_checksum_address(arg) if isinstance(arg, str) and is_address(arg) else arg
        for arg in args
    )


def load_artifact(artifact_path: str) -> ContractArtifact:
    """Load ABI and creation bytecode from a Hardhat artifact JSON file"""
    try:
        with open(artifact_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Could not load contract artifact {artifact_path}: {e}") from e

    if 'abi' not in data or not data.get('bytecode'):
        raise ConfigurationError(f"Artifact {artifact_path} has no abi/bytecode - compile the contract first")

    contract_name = data.get('contractName') or os.path.splitext(os.path.basename(artifact_path))[0]
    return ContractArtifact(contract_name=contract_name, abi=data['abi'], bytecode=data['bytecode'])


class ContractHandle:
    """Reference to a freshly deployed contract, used for read-only calls"""

    def __init__(self, contract, tx_hash: Optional[str] = None):
        self.contract = contract
        self.address = contract.address
        self.tx_hash = tx_hash

    async def call(self, function_name: str, *args) -> Any:
        """Call a view function on the contract"""
        function = getattr(self.contract.functions, function_name)
        return await function(*checksum_args(args)).call()


class ChainClient:
    """Signer, balance and contract-creation access to one EVM network"""

    def __init__(self, rpc_url: str, private_key: str, receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT):
        self.w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))
        self.account = Account.from_key(private_key)
        self.deployer_address = self.account.address
        self.receipt_timeout = receipt_timeout
        self.logger = logging.getLogger('arclara_deployer')

    @staticmethod
    def is_address(value: str) -> bool:
        return Web3.is_address(value)

    @staticmethod
    def format_ether(amount_wei: int) -> str:
        """Format a wei amount as a decimal ether string (display only)"""
        return str(Web3.from_wei(amount_wei, 'ether'))

    async def close(self):
        """Close the provider's HTTP session"""
        await self.w3.provider.disconnect()

    async def get_balance(self, address: str) -> int:
        """Get balance in wei"""
        return await self.w3.eth.get_balance(address)

    async def deploy_contract(self, artifact: ContractArtifact, *constructor_args) -> ContractHandle:
        """Sign and send a contract-creation transaction, then wait for its receipt"""
        factory = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

        nonce = await self.w3.eth.get_transaction_count(self.deployer_address, 'pending')
        chain_id = await self.w3.eth.chain_id

        tx = await factory.constructor(*checksum_args(constructor_args)).build_transaction({
            'from': self.deployer_address,
            'nonce': nonce,
            'chainId': chain_id,
        })

        signed_tx = self.account.sign_transaction(tx)
        tx_hash = await self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = self.w3.to_hex(tx_hash)

        print(f"📝 Transaction sent: {tx_hash_hex}")
        print("⏳ Waiting for confirmation...")
        self.logger.debug(f"Creation tx {tx_hash_hex} sent with nonce {nonce} on chain {chain_id}")

        receipt = await self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)

        if receipt['status'] != 1 or not receipt.get('contractAddress'):
            raise DeploymentError(f"Contract creation reverted (tx {tx_hash_hex})")

        contract = self.w3.eth.contract(address=receipt['contractAddress'], abi=artifact.abi)
        return ContractHandle(contract, tx_hash_hex)
