"""
Blockchain client for the Uniswap skill.

Wraps a synchronous ``web3.Web3`` instance. Every RPC round trip runs in a
worker thread so handlers can join independent reads with
``asyncio.gather`` and bound lenient reads with ``asyncio.wait_for``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from eth_account import Account
from web3 import Web3

from ..helpers import RpcTimeout
from .abis import ERC20_ABI, QUOTER_ABI, ROUTER_ABI

if TYPE_CHECKING:
  from collections.abc import Awaitable, Callable

  from eth_account.signers.local import LocalAccount

  from ..networks import NetworkProfile

log = logging.getLogger("skill.uniswap.client")

SWAP_DEADLINE_SECONDS = 1800
RECEIPT_TIMEOUT_SECONDS = 120


class TransactionFailed(Exception):
  """A broadcast transaction was mined with a failure status."""


@dataclass(frozen=True)
class QuoteResult:
  amount_out: int
  sqrt_price_x96_after: int
  initialized_ticks_crossed: int
  gas_estimate: int


@dataclass(frozen=True)
class TxOutcome:
  tx_hash: str
  block_number: int
  gas_used: int


def account_from_key(private_key: str) -> LocalAccount:
  """Build a signing account from raw key material (hex, with or without 0x)."""
  return Account.from_key(private_key)


async def with_timeout(awaitable: Awaitable[Any], seconds: float, what: str) -> Any:
  """Await ``awaitable``, raising RpcTimeout after ``seconds``."""
  try:
    return await asyncio.wait_for(awaitable, timeout=seconds)
  except asyncio.TimeoutError as exc:
    raise RpcTimeout(f"{what} timed out after {seconds:g}s") from exc


def create_web3(profile: NetworkProfile) -> Web3:
  return Web3(
    Web3.HTTPProvider(
      profile.rpc_url,
      request_kwargs={"timeout": profile.request_timeout},
    )
  )


class ChainClient:
  """Reads and writes against one network's RPC endpoint."""

  def __init__(self, profile: NetworkProfile, w3: Web3 | None = None) -> None:
    self.profile = profile
    self.w3 = w3 or create_web3(profile)

  # -------------------------------------------------------------------------
  # Plumbing
  # -------------------------------------------------------------------------

  async def _run(self, fn: Callable[..., Any], *args: Any) -> Any:
    return await asyncio.to_thread(fn, *args)

  def _token(self, token_address: str) -> Any:
    return self.w3.eth.contract(address=Web3.to_checksum_address(token_address), abi=ERC20_ABI)

  def _quoter(self) -> Any:
    return self.w3.eth.contract(
      address=Web3.to_checksum_address(self.profile.contracts.quoter),
      abi=QUOTER_ABI,
    )

  def _router(self) -> Any:
    return self.w3.eth.contract(
      address=Web3.to_checksum_address(self.profile.contracts.swap_router),
      abi=ROUTER_ABI,
    )

  # -------------------------------------------------------------------------
  # Reads
  # -------------------------------------------------------------------------

  async def get_native_balance(self, address: str) -> int:
    return await self._run(self.w3.eth.get_balance, Web3.to_checksum_address(address))

  async def get_block_number(self) -> int:
    return await self._run(lambda: self.w3.eth.block_number)

  async def get_chain_id(self) -> int:
    return await self._run(lambda: self.w3.eth.chain_id)

  async def get_gas_price(self) -> int:
    return await self._run(lambda: self.w3.eth.gas_price)

  async def token_decimals(self, token_address: str) -> int:
    contract = self._token(token_address)
    return int(await self._run(contract.functions.decimals().call))

  async def token_symbol(self, token_address: str) -> str:
    contract = self._token(token_address)
    return str(await self._run(contract.functions.symbol().call))

  async def token_balance(self, token_address: str, owner: str) -> int:
    contract = self._token(token_address)
    fn = contract.functions.balanceOf(Web3.to_checksum_address(owner))
    return int(await self._run(fn.call))

  async def quote_exact_input_single(
    self,
    token_in: str,
    token_out: str,
    fee: int,
    amount_in: int,
  ) -> QuoteResult:
    """Simulate a single-hop quote with eth_call; no transaction is sent."""
    fn = self._quoter().functions.quoteExactInputSingle(
      Web3.to_checksum_address(token_in),
      Web3.to_checksum_address(token_out),
      fee,
      amount_in,
      0,
    )
    amount_out, sqrt_price, ticks, gas_estimate = await self._run(fn.call)
    return QuoteResult(
      amount_out=int(amount_out),
      sqrt_price_x96_after=int(sqrt_price),
      initialized_ticks_crossed=int(ticks),
      gas_estimate=int(gas_estimate),
    )

  # -------------------------------------------------------------------------
  # Writes
  # -------------------------------------------------------------------------

  async def exact_input_single(
    self,
    account: LocalAccount,
    token_in: str,
    token_out: str,
    fee: int,
    amount_in: int,
    amount_out_minimum: int,
    value: int = 0,
  ) -> TxOutcome:
    params = {
      "tokenIn": Web3.to_checksum_address(token_in),
      "tokenOut": Web3.to_checksum_address(token_out),
      "fee": fee,
      "recipient": account.address,
      "deadline": int(time.time()) + SWAP_DEADLINE_SECONDS,
      "amountIn": amount_in,
      "amountOutMinimum": amount_out_minimum,
      "sqrtPriceLimitX96": 0,
    }
    fn = self._router().functions.exactInputSingle(params)
    return await self._run(self._transact, account, fn, value)

  async def approve(
    self,
    account: LocalAccount,
    token_address: str,
    spender: str,
    amount: int,
  ) -> TxOutcome:
    fn = self._token(token_address).functions.approve(Web3.to_checksum_address(spender), amount)
    return await self._run(self._transact, account, fn, 0)

  def _transact(self, account: LocalAccount, fn: Any, value: int) -> TxOutcome:
    """Build, sign, broadcast and wait for a contract call (blocking)."""
    tx = fn.build_transaction(
      {
        "from": account.address,
        "value": value,
        "nonce": self.w3.eth.get_transaction_count(account.address),
        "chainId": self.profile.chain_id,
      }
    )
    signed = account.sign_transaction(tx)
    tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
    hash_hex = Web3.to_hex(tx_hash)
    log.info("Broadcast %s on %s", hash_hex, self.profile.name)

    receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=RECEIPT_TIMEOUT_SECONDS)
    if receipt["status"] != 1:
      raise TransactionFailed(
        f"transaction {hash_hex} reverted in block {receipt['blockNumber']}"
      )
    return TxOutcome(
      tx_hash=hash_hex,
      block_number=int(receipt["blockNumber"]),
      gas_used=int(receipt["gasUsed"]),
    )
