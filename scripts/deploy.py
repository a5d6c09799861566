#!/usr/bin/env python3
"""
BloXie Token Deployment Script
Deploys BloXie linked against the already deployed IterableMapping library
"""

import asyncio
import logging
import sys

from deployer.config import configure_logging
from deployer.runtime import Runtime

logger = logging.getLogger(__name__)

CONTRACT_NAME = "BloXie"
LIBRARY_NAME = "IterableMapping"
ITERABLE_MAPPING_ADDRESS = "0xfce64a0e8127eb939b91f59a2efda5caab6ad0ca"


async def main(runtime: Runtime = None):
    """Deploy the token contract"""
    runtime = runtime or Runtime.from_env()

    deployer = (await runtime.get_signers())[0]

    print("Deploying contracts with the account:", deployer.address)

    print("Account balance:", str(await deployer.get_balance()))

    # IterableMapping itself is deployed with scripts/deploy_library.py
    token_factory = await runtime.get_contract_factory(
        CONTRACT_NAME,
        libraries={LIBRARY_NAME: ITERABLE_MAPPING_ADDRESS},
        signer=deployer,
    )

    token = await token_factory.deploy()
    print("Token address:", token.address)

    explorer_url = runtime.explorer_address_url(token.address)
    if explorer_url:
        logger.info(f"Explorer URL: {explorer_url}")

    return token


def run(runtime: Runtime = None) -> int:
    configure_logging()
    try:
        asyncio.run(main(runtime))
    except Exception as e:
        print(repr(e), file=sys.stderr)
        logger.debug("Deployment failed", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
