import json
from unittest.mock import MagicMock

import pytest

from deployer.runtime import Runtime

DEPLOYER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
DEPLOYER_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
BALANCE = 10000 * 10**18
TX_HASH = bytes.fromhex("ab" * 32)

MAPPING_SOURCE = "contracts/IterableMapping.sol"
PLACEHOLDER = "__$" + "a1" * 17 + "$__"
BLOXIE_BYTECODE = "0x608060405273" + PLACEHOLDER + "6000f3"
BLOXIE_LINK_REFERENCES = {
    MAPPING_SOURCE: {"IterableMapping": [{"start": 6, "length": 20}]},
}
MAPPING_BYTECODE = "0x6080604052600a6000f3"


def write_artifact(root, source_name, contract_name, bytecode, link_references=None, abi=None):
    directory = root / source_name
    directory.mkdir(parents=True, exist_ok=True)
    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": abi or [],
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
        "linkReferences": link_references or {},
        "deployedLinkReferences": {},
    }
    (directory / f"{contract_name}.json").write_text(json.dumps(artifact))
    (directory / f"{contract_name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/x.json"})
    )
    return directory / f"{contract_name}.json"


@pytest.fixture
def artifacts_dir(tmp_path):
    root = tmp_path / "artifacts"
    write_artifact(root, "contracts/BloXie.sol", "BloXie", BLOXIE_BYTECODE, BLOXIE_LINK_REFERENCES)
    write_artifact(root, MAPPING_SOURCE, "IterableMapping", MAPPING_BYTECODE)
    (root / "build-info").mkdir()
    (root / "build-info" / "x.json").write_text(json.dumps({"contractName": "BloXie"}))
    return root


def make_web3(accounts=None, balance=BALANCE, receipt=None):
    """Web3 double with the calls the deployment goes through"""
    w3 = MagicMock()
    w3.eth.accounts = [DEPLOYER_ADDRESS] if accounts is None else accounts
    w3.eth.get_balance.return_value = balance
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.send_transaction.return_value = TX_HASH
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = (
        receipt if receipt is not None else {"status": 1, "contractAddress": TOKEN_ADDRESS}
    )
    w3.eth.contract.return_value.constructor.return_value.build_transaction.return_value = {
        "from": DEPLOYER_ADDRESS,
        "data": "0x6080",
        "gas": 500000,
        "chainId": 31337,
    }
    w3.to_wei.side_effect = lambda value, unit: int(value * 10**9)
    return w3


@pytest.fixture
def web3():
    return make_web3()


@pytest.fixture
def runtime(web3, artifacts_dir):
    runtime = Runtime(network="localhost", artifacts_dir=str(artifacts_dir))
    runtime.web3 = web3
    return runtime
