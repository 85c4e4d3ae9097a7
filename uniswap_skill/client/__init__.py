"""
Web3 client for Uniswap v3 reads, quotes and transactions.
"""

from .chain_client import (
  ChainClient,
  QuoteResult,
  TransactionFailed,
  TxOutcome,
  account_from_key,
  with_timeout,
)

__all__ = [
  "ChainClient",
  "QuoteResult",
  "TransactionFailed",
  "TxOutcome",
  "account_from_key",
  "with_timeout",
]
