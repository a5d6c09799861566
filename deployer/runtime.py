"""
Runtime
Entry point used by the scripts: network connection, signers and contract factories
"""

import logging
from typing import Dict, List, Optional

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from deployer import config
from deployer.artifacts import link_bytecode, read_artifact
from deployer.contract_factory import ContractFactory
from deployer.errors import NetworkConnectionError
from deployer.signers import BaseSigner, get_signers

logger = logging.getLogger(__name__)


class Runtime:
    def __init__(
        self,
        network: str = config.DEFAULT_NETWORK,
        private_keys: Optional[List[str]] = None,
        artifacts_dir: str = config.DEFAULT_ARTIFACTS_DIR,
        gas_price_gwei: Optional[float] = None,
    ):
        self.network = network
        self.network_config = config.get_network_config(network)
        self.private_keys = private_keys or []
        self.artifacts_dir = artifacts_dir
        self.gas_price_gwei = gas_price_gwei
        self.web3: Optional[Web3] = None

    @classmethod
    def from_env(cls) -> "Runtime":
        return cls(
            network=config.get_network_name(),
            private_keys=config.get_private_keys(),
            artifacts_dir=config.get_artifacts_dir(),
            gas_price_gwei=config.get_gas_price_gwei(),
        )

    def connect(self) -> Web3:
        """Initialize the Web3 connection, once"""
        if self.web3 is not None:
            return self.web3

        rpc = self.network_config["rpc"]
        w3 = Web3(Web3.HTTPProvider(rpc))
        if self.network_config.get("poa"):
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        if not w3.is_connected():
            raise NetworkConnectionError(f"Failed to connect to {self.network} at {rpc}")

        logger.info(f"Connected to {self.network} (chain id {self.network_config['chain_id']})")
        self.web3 = w3
        return w3

    async def get_signers(self) -> List[BaseSigner]:
        w3 = self.connect()
        return get_signers(w3, self.private_keys, self.gas_price_gwei)

    async def get_contract_factory(
        self,
        name: str,
        libraries: Optional[Dict[str, str]] = None,
        signer: Optional[BaseSigner] = None,
    ) -> ContractFactory:
        """Contract factory for a compiled contract, linked against the given libraries"""
        artifact = read_artifact(name, self.artifacts_dir)
        bytecode = link_bytecode(artifact, libraries)

        if signer is None:
            signer = (await self.get_signers())[0]

        return ContractFactory(self.connect(), artifact, bytecode, signer)

    def explorer_address_url(self, address: str) -> Optional[str]:
        explorer = self.network_config.get("explorer")
        if not explorer:
            return None
        return f"{explorer}/address/{address}"
