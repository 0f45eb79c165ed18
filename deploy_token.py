#!/usr/bin/env python3
"""
Arclara Token (ARCL) Deployer
Deploys a single ArclaraToken, verifies its on-chain state and records the deployment.

Usage:
- Set up your .env file with PRIVATE_KEY, RPC_URL and TREASURY_WALLET
- Compile the contract with Hardhat so the artifact JSON exists
- Run: python deploy_token.py --network <network-name>
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from arclara_deployer.config import load_settings, setup_logging
from arclara_deployer.errors import ConfigurationError, DeployerError
from arclara_deployer.models import ContractArtifact, DeploymentConfiguration
from arclara_deployer.pipeline import DeploymentPipeline
from arclara_deployer.report import print_next_steps, print_verification_report
from arclara_deployer.services import ChainClient, load_artifact
from arclara_deployer.storage import RecordPersister

logger = logging.getLogger('arclara_deployer')


async def run_deployment(client, artifact: ContractArtifact, config: DeploymentConfiguration,
                         persister: RecordPersister) -> int:
    """Run the pipeline and map its result to a process exit code"""
    print("\n=== Arclara Token Deployment ===")
    print(f"Network: {config.network_name}")
    print(f"Deployer address: {client.deployer_address}")

    try:
        pipeline = DeploymentPipeline(client, artifact, persister)
        outcome = await pipeline.run(config)
    except DeployerError as e:
        logger.error(f"Deployment on '{config.network_name}' failed: {type(e).__name__}: {e}")
        print(f"\n❌ Deployment failed: {e}")
        return 1
    finally:
        await client.close()

    print_verification_report(outcome, client.format_ether)
    print_next_steps(outcome)
    if outcome.degraded:
        logger.warning(f"Token deployed at {outcome.record.token_address} but the deployment record was not saved")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deploy and verify the ArclaraToken contract")
    parser.add_argument("--network", help="Network name recorded with the deployment (default: $NETWORK_NAME)")
    parser.add_argument("--artifact", help="Path to the Hardhat artifact JSON (default: $ARTIFACT_PATH)")
    parser.add_argument("--deployments-dir", help="Directory for deployment records (default: $DEPLOYMENTS_DIR)")
    parser.add_argument("--env-file", help="Load environment from this file instead of .env")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging()

    try:
        settings = load_settings(args.env_file)
        network_name = args.network or settings.network_name
        if not network_name:
            raise ConfigurationError("No network given - pass --network or set NETWORK_NAME")

        artifact = load_artifact(args.artifact or settings.artifact_path)
        try:
            client = ChainClient(settings.rpc_url, settings.private_key, settings.receipt_timeout)
        except ValueError as e:
            raise ConfigurationError(f"Invalid PRIVATE_KEY: {e}")
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"\n❌ CONFIGURATION ERROR: {e}")
        print("   Please ensure you have a .env file with all required variables.")
        return 1

    config = DeploymentConfiguration(
        treasury_address=settings.treasury_wallet,
        network_name=network_name,
    )
    persister = RecordPersister(args.deployments_dir or settings.deployments_dir)
    return asyncio.run(run_deployment(client, artifact, config, persister))


if __name__ == "__main__":
    sys.exit(main())
