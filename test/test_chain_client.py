"""
Tests for the Web3 chain client, with the provider mocked out
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from web3 import AsyncWeb3
from web3.contract.async_contract import AsyncContractConstructor, AsyncContractFunction

from arclara_deployer.errors import ConfigurationError, DeploymentError
from arclara_deployer.models import ContractArtifact
from arclara_deployer.services.chain_client import ChainClient, ContractHandle, checksum_args, load_artifact
from arclara_deployer.services.verifier import StateVerifier

from fakes import TREASURY, TOKEN, TX_HASH

# Hardhat's well-known first development account
HARDHAT_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
HARDHAT_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
RPC_URL = "http://127.0.0.1:8545"

# EIP-55 reference address and its lowercase / unprefixed spellings
CHECKSUMMED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
LOWERCASE = CHECKSUMMED.lower()
UNPREFIXED = LOWERCASE[2:]


def view(name, inputs, output):
    return {
        "type": "function",
        "name": name,
        "stateMutability": "view",
        "inputs": [{"name": f"arg{i}", "type": t} for i, t in enumerate(inputs)],
        "outputs": [{"name": "", "type": output}],
    }


TOKEN_ABI = [
    {"type": "constructor", "stateMutability": "nonpayable",
     "inputs": [{"name": "_treasury", "type": "address"}]},
    view("name", [], "string"),
    view("symbol", [], "string"),
    view("decimals", [], "uint8"),
    view("totalSupply", [], "uint256"),
    view("balanceOf", ["address"], "uint256"),
    view("burnBps", [], "uint256"),
    view("treasuryBps", [], "uint256"),
    view("maxWalletBps", [], "uint256"),
    view("maxSellBps", [], "uint256"),
    view("cooldownSeconds", [], "uint256"),
    view("treasuryWallet", [], "address"),
    view("isExempt", ["address"], "bool"),
]


async def awaitable(value):
    return value


class TestLoadArtifact:

    def test_loads_hardhat_artifact(self, tmp_path):
        path = tmp_path / "ArclaraToken.json"
        path.write_text(json.dumps({
            "contractName": "ArclaraToken",
            "abi": [{"type": "constructor", "inputs": [{"name": "_treasury", "type": "address"}]}],
            "bytecode": "0x6080604052",
        }))

        artifact = load_artifact(str(path))

        assert artifact.contract_name == "ArclaraToken"
        assert artifact.bytecode == "0x6080604052"
        assert artifact.abi[0]["type"] == "constructor"

    def test_name_falls_back_to_file_name(self, tmp_path):
        path = tmp_path / "ArclaraToken.json"
        path.write_text(json.dumps({"abi": [], "bytecode": "0x60"}))

        assert load_artifact(str(path)).contract_name == "ArclaraToken"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_artifact(str(tmp_path / "missing.json"))

    def test_uncompiled_artifact(self, tmp_path):
        path = tmp_path / "ArclaraToken.json"
        path.write_text(json.dumps({"abi": [], "bytecode": ""}))

        with pytest.raises(ConfigurationError, match="compile"):
            load_artifact(str(path))


class TestChainClient:

    @pytest.fixture
    def client(self):
        client = ChainClient("http://127.0.0.1:8545", HARDHAT_KEY, receipt_timeout=42)
        client.w3 = MagicMock()
        return client

    @pytest.fixture
    def artifact(self):
        return ContractArtifact(contract_name="ArclaraToken", abi=[], bytecode="0x6080")

    def test_deployer_address_from_private_key(self, client):
        assert client.deployer_address == HARDHAT_ADDRESS

    def test_format_ether(self):
        assert ChainClient.format_ether(1_500_000_000_000_000_000) == "1.5"

    @pytest.mark.asyncio
    async def test_get_balance(self, client):
        client.w3.eth.get_balance = AsyncMock(return_value=123)

        assert await client.get_balance(HARDHAT_ADDRESS) == 123
        client.w3.eth.get_balance.assert_awaited_once_with(HARDHAT_ADDRESS)

    def _wire_deployment(self, client, receipt, contract_factory=None):
        if contract_factory is None:
            factory = MagicMock()
            factory.constructor.return_value.build_transaction = AsyncMock(return_value={'data': '0x6080'})
            deployed = MagicMock()
            deployed.address = TOKEN
            client.w3.eth.contract.side_effect = [factory, deployed]
        else:
            factory = None
            client.w3.eth.contract.side_effect = contract_factory
        client.w3.eth.get_transaction_count = AsyncMock(return_value=7)
        client.w3.eth.chain_id = awaitable(31337)
        client.w3.eth.send_raw_transaction = AsyncMock(return_value=b'\xab' * 32)
        client.w3.eth.wait_for_transaction_receipt = AsyncMock(return_value=receipt)
        client.w3.to_hex.return_value = TX_HASH
        client.account = MagicMock()
        client.account.sign_transaction.return_value.raw_transaction = b'signed'
        return factory

    @pytest.mark.asyncio
    async def test_deploy_contract(self, client, artifact):
        factory = self._wire_deployment(client, {'status': 1, 'contractAddress': TOKEN})

        handle = await client.deploy_contract(artifact, TREASURY)

        assert handle.address == TOKEN
        assert handle.tx_hash == TX_HASH
        factory.constructor.assert_called_once_with(TREASURY)
        factory.constructor.return_value.build_transaction.assert_awaited_once_with({
            'from': HARDHAT_ADDRESS,
            'nonce': 7,
            'chainId': 31337,
        })
        client.w3.eth.send_raw_transaction.assert_awaited_once_with(b'signed')
        client.w3.eth.wait_for_transaction_receipt.assert_awaited_once_with(b'\xab' * 32, timeout=42)

    @pytest.mark.asyncio
    async def test_reverted_receipt(self, client, artifact):
        self._wire_deployment(client, {'status': 0, 'contractAddress': None})

        with pytest.raises(DeploymentError, match="reverted"):
            await client.deploy_contract(artifact, TREASURY)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("treasury", [LOWERCASE, UNPREFIXED, CHECKSUMMED])
    async def test_deploy_contract_encodes_any_valid_treasury_spelling(self, client, treasury, monkeypatch):
        real_w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(RPC_URL))
        built = []

        async def build_transaction(constructor, transaction=None):
            built.append(transaction)
            return {'data': '0x6080'}

        monkeypatch.setattr(AsyncContractConstructor, 'build_transaction', build_transaction)
        self._wire_deployment(client, {'status': 1, 'contractAddress': TOKEN},
                              contract_factory=real_w3.eth.contract)
        artifact = ContractArtifact(contract_name="ArclaraToken", abi=TOKEN_ABI, bytecode="0x6080")

        handle = await client.deploy_contract(artifact, treasury)

        assert handle.address == TOKEN
        assert built == [{'from': HARDHAT_ADDRESS, 'nonce': 7, 'chainId': 31337}]

    @pytest.mark.asyncio
    async def test_close_disconnects_provider(self, client):
        client.w3.provider.disconnect = AsyncMock()

        await client.close()

        client.w3.provider.disconnect.assert_awaited_once_with()


class TestContractHandle:

    @pytest.mark.asyncio
    async def test_call_invokes_view_function(self):
        contract = MagicMock()
        contract.address = TOKEN
        contract.functions.isExempt.return_value.call = AsyncMock(return_value=True)

        handle = ContractHandle(contract, TX_HASH)

        assert await handle.call('isExempt', TREASURY) is True
        contract.functions.isExempt.assert_called_once_with(TREASURY)

    def test_checksum_args_only_touches_addresses(self):
        assert checksum_args((LOWERCASE, UNPREFIXED, CHECKSUMMED, 5, "Arclara")) == (
            CHECKSUMMED, CHECKSUMMED, CHECKSUMMED, 5, "Arclara",
        )


class TestVerifierWithWeb3Contract:
    """Read-back through real web3 contract functions, only the RPC call is replaced"""

    @pytest.fixture
    def recorded_calls(self, monkeypatch):
        calls = []
        values = {
            'name': "Arclara", 'symbol': "ARCL", 'decimals': 18,
            'totalSupply': 10**27, 'balanceOf': 10**27,
            'burnBps': 100, 'treasuryBps': 200, 'maxWalletBps': 200, 'maxSellBps': 100,
            'cooldownSeconds': 30, 'treasuryWallet': CHECKSUMMED, 'isExempt': True,
        }

        async def call(function, *args, **kwargs):
            calls.append((function.fn_name, tuple(function.args)))
            return values[function.fn_name]

        monkeypatch.setattr(AsyncContractFunction, 'call', call)
        return calls

    @pytest.mark.asyncio
    async def test_lowercase_addresses_are_checksummed_before_encoding(self, recorded_calls):
        real_w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(RPC_URL))
        handle = ContractHandle(real_w3.eth.contract(address=TOKEN, abi=TOKEN_ABI), TX_HASH)

        state = await StateVerifier(HARDHAT_ADDRESS.lower(), LOWERCASE).verify(handle)

        assert state.treasury_wallet == CHECKSUMMED
        assert state.treasury_exempt is True
        assert ('balanceOf', (HARDHAT_ADDRESS,)) in recorded_calls
        exempt_args = sorted(args for name, args in recorded_calls if name == 'isExempt')
        assert exempt_args == sorted([(HARDHAT_ADDRESS,), (TOKEN,), (CHECKSUMMED,)])
