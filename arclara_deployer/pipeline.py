"""
Deployment pipeline: validate -> deploy -> verify -> persist
"""

import json
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from arclara_deployer.models import (
    ContractArtifact,
    DeploymentConfiguration,
    DeploymentOutcome,
    DeploymentRecord,
)
from arclara_deployer.services.validator import validate_treasury_address
from arclara_deployer.services.executor import DeploymentExecutor
from arclara_deployer.services.verifier import StateVerifier
from arclara_deployer.storage.record_store import RecordPersister


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-31T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class DeploymentPipeline:
    """Runs one deployment end to end

    ConfigurationError, DeploymentError and VerificationError propagate to
    the caller. A failed record write yields a "degraded" outcome instead.
    """

    def __init__(self, client, artifact: ContractArtifact,
                 persister: Optional[RecordPersister] = None,
                 clock: Callable[[], str] = utc_timestamp):
        self.client = client
        self.artifact = artifact
        self.persister = persister or RecordPersister()
        self.clock = clock
        self.logger = logging.getLogger('arclara_deployer')

    async def run(self, config: DeploymentConfiguration) -> DeploymentOutcome:
        self.logger.info(f"Starting {self.artifact.contract_name} deployment on network '{config.network_name}'")

        # Stage 1: no network I/O happens before this passes
        treasury = validate_treasury_address(config.treasury_address, self.client.is_address)
        print(f"\nTreasury Wallet: {treasury}")

        # Stage 2
        executor = DeploymentExecutor(self.client, self.artifact)
        handle = await executor.deploy(treasury)

        # Stage 3
        verifier = StateVerifier(self.client.deployer_address, treasury)
        state = await verifier.verify(handle)

        # Stage 4
        record = DeploymentRecord.from_state(
            network=config.network_name,
            deployer=self.client.deployer_address,
            token_address=handle.address,
            treasury_wallet=treasury,
            deployment_time=self.clock(),
            state=state,
        )
        print("\nDeployment Info:")
        print(json.dumps(record.to_dict(), indent=2))

        persist_result = self.persister.save(record)
        status = "success" if persist_result.ok else "degraded"
        self.logger.info(f"Deployment on '{config.network_name}' finished with status {status}")

        return DeploymentOutcome(
            status=status,
            record=record,
            verified_state=state,
            persist_result=persist_result,
            tx_hash=getattr(handle, 'tx_hash', None),
        )
