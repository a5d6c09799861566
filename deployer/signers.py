"""
Signers
Accounts able to authorize transactions, either from local private keys or
unlocked on the node
"""

import logging
from typing import Dict, List, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address
from web3 import Web3

from deployer.errors import NoSignersError

logger = logging.getLogger(__name__)


class BaseSigner:
    def __init__(self, w3: Web3, address: str, gas_price_gwei: Optional[float] = None):
        self.w3 = w3
        self.address = to_checksum_address(address)
        self.gas_price_gwei = gas_price_gwei

    async def get_balance(self) -> int:
        """Get account balance in wei"""
        try:
            return self.w3.eth.get_balance(self.address)
        except Exception as e:
            logger.error(f"Failed to get balance of {self.address}: {e}")
            raise

    def transaction_params(self) -> Dict:
        """Fields every transaction from this signer starts with"""
        tx = {"from": self.address}
        if self.gas_price_gwei is not None:
            tx["gasPrice"] = self.w3.to_wei(self.gas_price_gwei, "gwei")
        return tx

    async def send_transaction(self, tx: Dict) -> bytes:
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__} {self.address}>"


class LocalSigner(BaseSigner):
    """Signs with a private key held in this process"""

    def __init__(self, w3: Web3, account: LocalAccount, gas_price_gwei: Optional[float] = None):
        super().__init__(w3, account.address, gas_price_gwei)
        self.account = account

    async def send_transaction(self, tx: Dict) -> bytes:
        try:
            tx = {
                "nonce": self.w3.eth.get_transaction_count(self.address),
                **tx,
            }
            signed_tx = self.account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            logger.info(f"Sent transaction {tx_hash.hex()} from {self.address}")
            return tx_hash
        except Exception as e:
            logger.error(f"Failed to send transaction from {self.address}: {e}")
            raise


class NodeSigner(BaseSigner):
    """Account unlocked on the node, e.g. the default hardhat node accounts"""

    async def send_transaction(self, tx: Dict) -> bytes:
        try:
            tx_hash = self.w3.eth.send_transaction({**self.transaction_params(), **tx})
            logger.info(f"Sent transaction {tx_hash.hex()} from {self.address}")
            return tx_hash
        except Exception as e:
            logger.error(f"Failed to send transaction from {self.address}: {e}")
            raise


def get_signers(
    w3: Web3,
    private_keys: Optional[List[str]] = None,
    gas_price_gwei: Optional[float] = None,
) -> List[BaseSigner]:
    """Local signers when private keys are configured, the node accounts otherwise"""
    if private_keys:
        return [
            LocalSigner(w3, Account.from_key(key), gas_price_gwei)
            for key in private_keys
        ]

    try:
        accounts = w3.eth.accounts
    except Exception as e:
        logger.error(f"Failed to list node accounts: {e}")
        raise

    if not accounts:
        raise NoSignersError(
            "No signers available. Set PRIVATE_KEY or use a node with unlocked accounts"
        )
    return [NodeSigner(w3, address, gas_price_gwei) for address in accounts]
