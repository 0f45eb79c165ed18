"""
File storage for deployment records, one JSON file per network
"""

import os
import json
import logging

from arclara_deployer.config import DEFAULT_DEPLOYMENTS_DIR
from arclara_deployer.errors import PersistenceError
from arclara_deployer.models import DeploymentRecord, PersistResult


class RecordPersister:
    """Writes <network>-deployment.json into the deployments directory"""

    def __init__(self, deployments_dir: str = DEFAULT_DEPLOYMENTS_DIR):
        self.deployments_dir = deployments_dir
        self.logger = logging.getLogger('arclara_deployer')

    def path_for(self, network: str) -> str:
        return os.path.join(self.deployments_dir, f"{network}-deployment.json")

    def save(self, record: DeploymentRecord) -> PersistResult:
        """Save the record, replacing any earlier one for the same network

        Storage failures are returned in the result instead of raised: the
        contract is already live, so a missing local record is not fatal.
        """
        path = self.path_for(record.network)
        try:
            os.makedirs(self.deployments_dir, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(record.to_dict(), f, indent=2)
        except (OSError, TypeError, ValueError) as e:
            self.logger.warning(f"Could not save deployment info to {path}: {e}")
            return PersistResult(path=path, error=PersistenceError(str(e)))

        self.logger.info(f"Deployment info saved to {path}")
        return PersistResult(path=path)
