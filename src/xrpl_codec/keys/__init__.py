"""
Key material for the XRP Ledger.

Provides destroyable seeds derived from passphrases or raw entropy.
"""

from .seed import Seed

__all__ = [
    "Seed",
]
