"""
Data models for a single token deployment run
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from arclara_deployer.errors import PersistenceError


@dataclass(frozen=True)
class DeploymentConfiguration:
    """Operator-supplied parameters, fixed at process start"""
    treasury_address: str
    network_name: str


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as produced by the Hardhat build"""
    contract_name: str
    abi: List[Dict]
    bytecode: str


@dataclass(frozen=True)
class VerifiedState:
    """On-chain values observed right after deployment"""
    name: str
    symbol: str
    decimals: int
    total_supply: int
    deployer_balance: int
    burn_bps: int
    treasury_bps: int
    max_wallet_bps: int
    max_sell_bps: int
    cooldown_seconds: int
    treasury_wallet: str
    owner_exempt: bool
    contract_exempt: bool
    treasury_exempt: bool


@dataclass(frozen=True)
class DeploymentRecord:
    """Persisted summary of a successful deployment"""
    network: str
    deployer: str
    token_address: str
    treasury_wallet: str
    deployment_time: str  # ISO-8601, UTC
    configuration: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_state(cls, network: str, deployer: str, token_address: str,
                   treasury_wallet: str, deployment_time: str,
                   state: VerifiedState) -> "DeploymentRecord":
        """Build a record from the verified snapshot; bps values are string-encoded"""
        return cls(
            network=network,
            deployer=deployer,
            token_address=token_address,
            treasury_wallet=treasury_wallet,
            deployment_time=deployment_time,
            configuration={
                "burnBps": str(state.burn_bps),
                "treasuryBps": str(state.treasury_bps),
                "maxWalletBps": str(state.max_wallet_bps),
                "maxSellBps": str(state.max_sell_bps),
                "cooldownSeconds": str(state.cooldown_seconds),
            },
        )

    def to_dict(self) -> Dict:
        return {
            "network": self.network,
            "deployer": self.deployer,
            "tokenAddress": self.token_address,
            "treasuryWallet": self.treasury_wallet,
            "deploymentTime": self.deployment_time,
            "configuration": dict(self.configuration),
        }


@dataclass(frozen=True)
class PersistResult:
    """Outcome of writing the deployment record"""
    path: str
    error: Optional[PersistenceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DeploymentOutcome:
    """Result of a pipeline run that reached the persistence stage

    status is "success" when the record was saved, "degraded" when the
    contract is deployed and verified but the record could not be written.
    """
    status: str
    record: DeploymentRecord
    verified_state: VerifiedState
    persist_result: PersistResult
    tx_hash: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.status == "degraded"
