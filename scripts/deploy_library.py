#!/usr/bin/env python3
"""
IterableMapping Library Deployment Script
Run once per network, then update ITERABLE_MAPPING_ADDRESS in scripts/deploy.py
"""

import asyncio
import logging
import sys

from deployer.config import configure_logging
from deployer.runtime import Runtime

logger = logging.getLogger(__name__)

LIBRARY_NAME = "IterableMapping"


async def main(runtime: Runtime = None):
    runtime = runtime or Runtime.from_env()

    deployer = (await runtime.get_signers())[0]

    print("Deploying contracts with the account:", deployer.address)

    print("Account balance:", str(await deployer.get_balance()))

    mapping_factory = await runtime.get_contract_factory(LIBRARY_NAME, signer=deployer)
    mapping = await mapping_factory.deploy()
    print("Mapping address:", mapping.address)

    return mapping


def run(runtime: Runtime = None) -> int:
    configure_logging()
    try:
        asyncio.run(main(runtime))
    except Exception as e:
        print(repr(e), file=sys.stderr)
        logger.debug("Library deployment failed", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
