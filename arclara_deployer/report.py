"""
Console output for a finished deployment
"""

from typing import Callable

from arclara_deployer.models import DeploymentOutcome


def bps_to_percent(bps: int) -> str:
    """Basis points as a percentage string, 10000 bps = 100%"""
    return f"{bps / 100:g}%"


def print_verification_report(outcome: DeploymentOutcome, format_ether: Callable[[int], str]):
    state = outcome.verified_state

    print(f"Token Name: {state.name}")
    print(f"Token Symbol: {state.symbol}")
    print(f"Decimals: {state.decimals}")
    print(f"Total Supply: {format_ether(state.total_supply)} {state.symbol}")
    print(f"Owner Balance: {format_ether(state.deployer_balance)} {state.symbol}")

    print("\nDefault Configuration:")
    print(f"Burn Fee: {state.burn_bps} BPS ({bps_to_percent(state.burn_bps)})")
    print(f"Treasury Fee: {state.treasury_bps} BPS ({bps_to_percent(state.treasury_bps)})")
    print(f"Max Wallet: {state.max_wallet_bps} BPS ({bps_to_percent(state.max_wallet_bps)})")
    print(f"Max Sell: {state.max_sell_bps} BPS ({bps_to_percent(state.max_sell_bps)})")
    print(f"Cooldown: {state.cooldown_seconds} seconds")
    print(f"Treasury Wallet: {state.treasury_wallet}")

    print("\nDefault Exemptions:")
    print(f"Owner Exempt: {state.owner_exempt}")
    print(f"Contract Exempt: {state.contract_exempt}")
    print(f"Treasury Exempt: {state.treasury_exempt}")


def print_next_steps(outcome: DeploymentOutcome):
    record = outcome.record

    print("\n=== Deployment Complete ===")
    if outcome.persist_result.ok:
        print(f"\n✅ Deployment info saved to: {outcome.persist_result.path}")
    else:
        print(f"\n⚠️  Could not save deployment info: {outcome.persist_result.error}")

    print("\nNext Steps:")
    print("1. Verify contract on block explorer:")
    print(f"   npx hardhat verify --network {record.network} {record.token_address} {record.treasury_wallet}")
    print("2. Create liquidity pool on DEX (e.g., Uniswap)")
    print("3. Set AMM pair address: token.setAutomatedMarketMakerPair(pairAddress, true)")
    print("4. (Optional) Exempt DEX router: token.setExempt(routerAddress, true)")
    print("5. (Optional) Adjust fees/limits:")
    print("   token.setFeesInBps(burnBps, treasuryBps)")
    print("   token.setLimitsInBps(maxWalletBps, maxSellBps)")
    print("   token.setCooldown(seconds)")
