"""
Test bootstrap:
- Add src/ to sys.path so the tests run from a plain checkout
- Shared fixtures for definitions, codecs and sample transactions
"""
import pathlib
import sys

import pytest

SRC = pathlib.Path(__file__).resolve().parent.parent / "src"

# Ensure src importability at collect-time
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from xrpl_codec.addresses import AddressCodec
from xrpl_codec.codec import BinaryCodec
from xrpl_codec.definitions import get_definitions

GENESIS_ADDRESS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"


@pytest.fixture
def definitions():
    """Provide the bundled field definitions."""
    return get_definitions()


@pytest.fixture
def codec(definitions):
    """Provide a binary codec over the bundled definitions."""
    return BinaryCodec(definitions)


@pytest.fixture
def genesis_address():
    """Provide the genesis account's classic address."""
    return GENESIS_ADDRESS


@pytest.fixture
def make_address():
    """Provide a factory for classic addresses with a repeated account id byte."""
    def _make(fill: int) -> str:
        return AddressCodec.encode_account_id(bytes([fill]) * 20)
    return _make


@pytest.fixture
def payment_tx(genesis_address, make_address):
    """Provide a signed XRP payment transaction."""
    return {
        "TransactionType": "Payment",
        "Account": genesis_address,
        "Destination": make_address(0x11),
        "Amount": "1000000",
        "Fee": "12",
        "Flags": 2147483648,
        "Sequence": 2,
        "SigningPubKey": "03" + "AB" * 32,
        "TxnSignature": "3045" + "CD" * 20,
    }
