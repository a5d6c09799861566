"""
Contract factory
Deploys linked bytecode from a signer and hands back the deployed contract
"""

import logging
from typing import Optional

from eth_utils import to_checksum_address
from web3 import Web3
from web3.contract import Contract

from deployer.artifacts import Artifact
from deployer.errors import DeploymentError
from deployer.signers import BaseSigner

logger = logging.getLogger(__name__)


class DeployedContract:
    def __init__(self, w3: Web3, artifact: Artifact, address: str, deploy_transaction_hash: Optional[str] = None):
        self.artifact = artifact
        self.address = to_checksum_address(address)
        self.deploy_transaction_hash = deploy_transaction_hash
        self.contract: Contract = w3.eth.contract(address=self.address, abi=artifact.abi)

    @property
    def functions(self):
        return self.contract.functions

    def __repr__(self):
        return f"<DeployedContract {self.artifact.contract_name} at {self.address}>"


class ContractFactory:
    def __init__(self, w3: Web3, artifact: Artifact, bytecode: str, signer: BaseSigner):
        self.w3 = w3
        self.artifact = artifact
        self.bytecode = bytecode
        self.signer = signer

    @property
    def contract_name(self) -> str:
        return self.artifact.contract_name

    def connect(self, signer: BaseSigner) -> "ContractFactory":
        """Same factory, deploying from another signer"""
        return ContractFactory(self.w3, self.artifact, self.bytecode, signer)

    async def deploy(self, *constructor_args) -> DeployedContract:
        """Send the creation transaction and wait until it is mined"""
        try:
            contract = self.w3.eth.contract(abi=self.artifact.abi, bytecode=self.bytecode)
            tx = contract.constructor(*constructor_args).build_transaction(
                self.signer.transaction_params()
            )

            tx_hash = await self.signer.send_transaction(tx)
            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)

            if receipt["status"] != 1:
                raise DeploymentError(
                    f"Deployment of {self.contract_name} reverted in transaction {tx_hash.hex()}"
                )
            if not receipt.get("contractAddress"):
                raise DeploymentError(
                    f"Transaction {tx_hash.hex()} did not create a {self.contract_name} contract"
                )

            logger.info(f"{self.contract_name} deployed at {receipt['contractAddress']}")
            return DeployedContract(self.w3, self.artifact, receipt["contractAddress"], tx_hash.hex())

        except Exception as e:
            logger.error(f"Failed to deploy {self.contract_name}: {e}")
            raise

    def attach(self, address: str) -> DeployedContract:
        return DeployedContract(self.w3, self.artifact, address)
