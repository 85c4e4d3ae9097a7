"""
Wallet handlers (connect, balances, approvals).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..client import account_from_key, with_timeout
from ..helpers import (
  ApprovalFailed,
  ConnectFailed,
  TokenQueryError,
  ToolResult,
  describe_error,
  wrap_failure,
)
from ..units import MAX_UINT256, NATIVE_DECIMALS, from_base_units, to_base_units
from ..validation import ValidationError, opt_amount, req_string
from .context import SkillContext, resolve_decimals

log = logging.getLogger("skill.uniswap.handlers.wallet")

# Approving this literal grants the router an unlimited (2**256 - 1) allowance.
UNLIMITED_APPROVAL = "max"


async def connect_wallet(ctx: SkillContext, args: dict[str, Any]) -> ToolResult:
  """
  Connect a signing wallet and report its native balance.

  The balance read is bounded by ``profile.balance_timeout``. When it times
  out or fails the wallet still connects and the balance is reported as
  zero with a note.
  """
  try:
    account = account_from_key(req_string(args, "privateKey"))
  except ValidationError as e:
    raise wrap_failure(ConnectFailed, "connect wallet", e)
  except Exception as e:
    # key parsers echo their input; keep key material out of the response
    raise ConnectFailed(f"Failed to connect wallet: invalid private key ({type(e).__name__})") from e

  session = ctx.session.connect(account)
  log.info("Wallet connected: %s on %s", session.address, ctx.profile.name)

  degraded: str | None = None
  try:
    balance = await with_timeout(
      ctx.client.get_native_balance(session.address),
      ctx.profile.balance_timeout,
      "Balance check",
    )
  except Exception as e:
    degraded = describe_error(e)
    log.warning("Balance check failed for %s: %s", session.address, degraded)
    balance = 0

  symbol = ctx.profile.native_symbol
  lines = [
    "✅ Wallet connected successfully!",
    "",
    f"Address: {session.address}",
    f"Balance: {from_base_units(balance, NATIVE_DECIMALS)} {symbol}",
    f"Network: {ctx.profile.name}",
  ]
  if degraded:
    lines += [
      "",
      f"Note: Balance unavailable ({degraded}); showing 0. "
      "Balance check may be limited due to RPC connectivity issues.",
    ]
  return ToolResult(content="\n".join(lines))


async def get_balance(ctx: SkillContext, args: dict[str, Any]) -> ToolResult:
  """Native balance for the native marker (e.g. 'ETH'), otherwise an ERC20 balance."""
  try:
    address = req_string(args, "address")
    token = req_string(args, "tokenAddress")

    if ctx.profile.is_native_marker(token):
      symbol = ctx.profile.native_symbol
      balance = await ctx.client.get_native_balance(address)
      return ToolResult(
        content=f"{symbol} Balance: {from_base_units(balance, NATIVE_DECIMALS)} {symbol}"
      )

    balance, decimals, symbol = await asyncio.gather(
      ctx.client.token_balance(token, address),
      ctx.client.token_decimals(token),
      ctx.client.token_symbol(token),
    )
  except Exception as e:
    raise wrap_failure(TokenQueryError, "get balance", e)

  return ToolResult(content=f"{symbol} Balance: {from_base_units(balance, decimals)} {symbol}")


async def approve_token(ctx: SkillContext, args: dict[str, Any]) -> ToolResult:
  """Approve the swap router to spend a token ('max' means unlimited)."""
  session = ctx.session.require()
  spender = ctx.profile.contracts.swap_router

  try:
    token = req_string(args, "tokenAddress")
    amount = opt_amount(args, "amount", UNLIMITED_APPROVAL)

    if amount == UNLIMITED_APPROVAL:
      approve_amount = MAX_UINT256
    else:
      approve_amount = to_base_units(amount, await resolve_decimals(ctx, token))

    outcome = await ctx.client.approve(session.account, token, spender, approve_amount)
  except Exception as e:
    raise wrap_failure(ApprovalFailed, "approve token", e)

  log.info("Approved %s for %s (tx %s)", token, spender, outcome.tx_hash)
  lines = [
    "✅ Approval Successful!",
    "",
    f"Token: {token}",
    f"Spender: {spender}",
    f"Amount: {'Unlimited' if amount == UNLIMITED_APPROVAL else amount}",
    f"Transaction Hash: {outcome.tx_hash}",
    f"Transaction: {ctx.profile.tx_url(outcome.tx_hash)}",
  ]
  return ToolResult(content="\n".join(lines))
