import pytest

from arclara_deployer.models import ContractArtifact, DeploymentConfiguration

from fakes import TREASURY, FakeClient


@pytest.fixture
def artifact():
    return ContractArtifact(contract_name="ArclaraToken", abi=[], bytecode="0x6080")


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def config():
    return DeploymentConfiguration(treasury_address=TREASURY, network_name="testnet")


@pytest.fixture
def fixed_clock():
    return lambda: "2025-01-31T12:00:00.000Z"
