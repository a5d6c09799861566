"""
Network and account configuration
Values come from the environment, with a local .env file loaded first
"""

import logging
import os
from typing import Dict, List, Optional

from dotenv import load_dotenv

from deployer.errors import UnsupportedNetworkError

# Load environment variables
load_dotenv()

DEFAULT_NETWORK = "localhost"
DEFAULT_ARTIFACTS_DIR = "artifacts"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Network configurations
NETWORKS = {
    "localhost": {
        "rpc": os.getenv("LOCALHOST_RPC", "http://127.0.0.1:8545"),
        "explorer": None,
        "chain_id": 31337,
        "poa": False,
    },
    "hardhat": {
        "rpc": os.getenv("LOCALHOST_RPC", "http://127.0.0.1:8545"),
        "explorer": None,
        "chain_id": 31337,
        "poa": False,
    },
    "polygon": {
        "rpc": os.getenv("POLYGON_RPC", "https://polygon-rpc.com"),
        "explorer": "https://polygonscan.com",
        "chain_id": 137,
        "poa": True,
    },
    "mumbai": {
        "rpc": os.getenv("MUMBAI_RPC", "https://rpc-mumbai.maticvigil.com"),
        "explorer": "https://mumbai.polygonscan.com",
        "chain_id": 80001,
        "poa": True,
    },
    "bsc": {
        "rpc": os.getenv("BSC_RPC", "https://bsc-dataseed.binance.org"),
        "explorer": "https://bscscan.com",
        "chain_id": 56,
        "poa": True,
    },
    "sepolia": {
        "rpc": os.getenv("SEPOLIA_RPC", "https://rpc.sepolia.org"),
        "explorer": "https://sepolia.etherscan.io",
        "chain_id": 11155111,
        "poa": False,
    },
}


def get_network_name() -> str:
    """Name of the active network, as set by the hardhat runner"""
    return os.getenv("HARDHAT_NETWORK") or DEFAULT_NETWORK


def get_network_config(name: str) -> Dict:
    if name not in NETWORKS:
        raise UnsupportedNetworkError(
            f"Unsupported network: {name} (expected one of {', '.join(sorted(NETWORKS))})"
        )
    return NETWORKS[name]


def get_private_keys() -> List[str]:
    """Private keys from PRIVATE_KEY, comma separated. Empty means use the node's accounts"""
    raw = os.getenv("PRIVATE_KEY", "")
    return [key.strip() for key in raw.split(",") if key.strip()]


def get_artifacts_dir() -> str:
    return os.getenv("ARTIFACTS_DIR", DEFAULT_ARTIFACTS_DIR)


def get_gas_price_gwei() -> Optional[float]:
    value = os.getenv("GAS_PRICE_GWEI")
    return float(value) if value else None


def configure_logging():
    """Configure logging for the command line scripts"""
    handlers = [logging.StreamHandler()]
    log_file = os.getenv("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT,
        handlers=handlers,
    )
