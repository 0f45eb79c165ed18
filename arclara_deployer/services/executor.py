"""
Deployment executor: submits the ArclaraToken creation transaction
"""

import logging

from arclara_deployer.errors import DeployerError, DeploymentError
from arclara_deployer.models import ContractArtifact


class DeploymentExecutor:
    """Submits one contract-creation transaction and waits for confirmation"""

    def __init__(self, client, artifact: ContractArtifact):
        self.client = client
        self.artifact = artifact
        self.logger = logging.getLogger('arclara_deployer')

    async def deploy(self, treasury_address: str):
        """Deploy the contract with the treasury wallet as constructor argument

        The deployer balance is only reported; an underfunded account fails
        at submission like any other transaction error.
        """
        deployer = self.client.deployer_address
        try:
            balance = await self.client.get_balance(deployer)
            print(f"💰 Deployer balance: {self.client.format_ether(balance)} ETH")
            self.logger.info(f"Deployer {deployer} balance: {balance} wei")

            print(f"\n🚀 Deploying {self.artifact.contract_name}...")
            handle = await self.client.deploy_contract(self.artifact, treasury_address)
        except DeployerError:
            raise
        except Exception as e:
            self.logger.error(f"Deployment of {self.artifact.contract_name} failed: {e}")
            raise DeploymentError(f"Failed to deploy {self.artifact.contract_name}: {e}") from e

        print(f"\n✅ {self.artifact.contract_name} deployed to: {handle.address}")
        self.logger.info(f"{self.artifact.contract_name} deployed at {handle.address} (tx {handle.tx_hash})")
        return handle
