"""
Post-deployment state read-back
"""

import asyncio
import logging

from arclara_deployer.errors import VerificationError
from arclara_deployer.models import VerifiedState


class StateVerifier:
    """Reads constructor-set state back from a deployed ArclaraToken

    Values are observed and reported, never compared against expected
    defaults. All queries are view calls so they are issued concurrently.
    """

    def __init__(self, deployer_address: str, treasury_address: str):
        self.deployer_address = deployer_address
        self.treasury_address = treasury_address
        self.logger = logging.getLogger('arclara_deployer')

    async def verify(self, handle) -> VerifiedState:
        print("\n🔍 Verifying deployment...")
        queries = [
            ('name',),
            ('symbol',),
            ('decimals',),
            ('totalSupply',),
            ('balanceOf', self.deployer_address),
            ('burnBps',),
            ('treasuryBps',),
            ('maxWalletBps',),
            ('maxSellBps',),
            ('cooldownSeconds',),
            ('treasuryWallet',),
            ('isExempt', self.deployer_address),
            ('isExempt', handle.address),
            ('isExempt', self.treasury_address),
        ]

        try:
            results = await asyncio.gather(*(handle.call(*query) for query in queries))
        except Exception as e:
            self.logger.error(f"Verification of {handle.address} failed: {e}")
            raise VerificationError(f"Contract at {handle.address} did not answer read queries: {e}") from e

        (name, symbol, decimals, total_supply, deployer_balance,
         burn_bps, treasury_bps, max_wallet_bps, max_sell_bps, cooldown_seconds,
         treasury_wallet, owner_exempt, contract_exempt, treasury_exempt) = results

        state = VerifiedState(
            name=name,
            symbol=symbol,
            decimals=int(decimals),
            total_supply=int(total_supply),
            deployer_balance=int(deployer_balance),
            burn_bps=int(burn_bps),
            treasury_bps=int(treasury_bps),
            max_wallet_bps=int(max_wallet_bps),
            max_sell_bps=int(max_sell_bps),
            cooldown_seconds=int(cooldown_seconds),
            treasury_wallet=treasury_wallet,
            owner_exempt=bool(owner_exempt),
            contract_exempt=bool(contract_exempt),
            treasury_exempt=bool(treasury_exempt),
        )
        self.logger.debug(f"Verified state for {handle.address}: {state}")
        return state
