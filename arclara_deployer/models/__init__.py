from arclara_deployer.models.deployment import (
    ContractArtifact,
    DeploymentConfiguration,
    DeploymentOutcome,
    DeploymentRecord,
    PersistResult,
    VerifiedState,
)
