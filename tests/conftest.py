from pathlib import Path

import pytest

from keyed_events.abi_events import Abi, load_abi

ABI_DIR = Path(__file__).parent / "abi"

TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
APPROVAL_T0 = "0x8c5be1e5ebec7d5bd14f71427d1e84f3dd0314c0f7b2291e5b200ac8c7c3b925"

ALICE = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
BOB = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def address_topic(address: str) -> str:
    """Left-pad a 20-byte address into a 32-byte topic (0x-hex)."""
    return "0x" + "0" * 24 + address[2:].lower()


@pytest.fixture
def erc20_abi() -> Abi:
    return load_abi(ABI_DIR / "erc20.json")


@pytest.fixture
def orders_abi() -> Abi:
    return load_abi(ABI_DIR / "orders.json")


@pytest.fixture
def transfer_log_json() -> dict:
    """Etherscan-style Transfer log moving 100 units from ALICE to BOB."""
    return {
        "address": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        "topics": [TRANSFER_T0, address_topic(ALICE), address_topic(BOB)],
        "data": "0x" + "00" * 31 + "64",
        "blockNumber": "0x10d4f",
        "transactionHash": "0x" + "ab" * 32,
        "logIndex": "0x0",
    }
