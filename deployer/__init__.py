"""
Deployment helpers for the BloXie contracts
"""

from deployer.artifacts import Artifact, link_bytecode, read_artifact
from deployer.contract_factory import ContractFactory, DeployedContract
from deployer.runtime import Runtime
from deployer.signers import LocalSigner, NodeSigner, get_signers

__all__ = [
    "Artifact",
    "ContractFactory",
    "DeployedContract",
    "LocalSigner",
    "NodeSigner",
    "Runtime",
    "get_signers",
    "link_bytecode",
    "read_artifact",
]
