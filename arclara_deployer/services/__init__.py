from arclara_deployer.services.validator import validate_treasury_address
from arclara_deployer.services.chain_client import ChainClient, ContractHandle, load_artifact
from arclara_deployer.services.executor import DeploymentExecutor
from arclara_deployer.services.verifier import StateVerifier
