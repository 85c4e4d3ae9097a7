"""
Trading handlers (quotes and swaps).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..helpers import QuoteFailed, SwapReverted, ToolResult, wrap_failure
from ..units import from_base_units
from ..validation import opt_int, opt_number, req_amount, req_string
from .context import SkillContext, resolve_amount, resolve_decimals

log = logging.getLogger("skill.uniswap.handlers.trading")

DEFAULT_FEE = 3000
DEFAULT_SLIPPAGE_PERCENT = 1

# Documented pool tiers in hundredths of a basis point. Not enforced: an
# unsupported tier reverts in the quoter/router.
FEE_TIERS = (500, 3000, 10000)


def _check_fee(fee: int) -> None:
  if fee not in FEE_TIERS:
    log.warning("Fee tier %s is not one of %s; expect a revert if no pool exists", fee, FEE_TIERS)


async def get_quote(ctx: SkillContext, args: dict[str, Any]) -> ToolResult:
  """Quote a single-hop exact-input swap via a simulated quoter call."""
  try:
    token_in = req_string(args, "tokenIn")
    token_out = req_string(args, "tokenOut")
    amount_in = req_amount(args, "amountIn")
    fee = opt_int(args, "fee", DEFAULT_FEE)
    _check_fee(fee)

    spec_in = await resolve_amount(ctx, token_in, amount_in)
    quote = await ctx.client.quote_exact_input_single(token_in, token_out, fee, spec_in.base_units)
    out_decimals = await resolve_decimals(ctx, token_out)
  except Exception as e:
    raise wrap_failure(QuoteFailed, "get quote", e)

  lines = [
    "📊 Swap Quote",
    "",
    f"Input: {amount_in}",
    f"Output: {from_base_units(quote.amount_out, out_decimals)}",
    f"Fee Tier: {fee / 10000:g}%",
    f"Gas Estimate: {quote.gas_estimate}",
  ]
  return ToolResult(content="\n".join(lines))


async def execute_swap(ctx: SkillContext, args: dict[str, Any]) -> ToolResult:
  """
  Execute a single-hop exact-input swap through the router.

  ``minAmountOut`` is used as the on-chain minimum exactly as given;
  ``slippagePercent`` is reported back but never applied to it.
  """
  session = ctx.session.require()

  try:
    token_in = req_string(args, "tokenIn")
    token_out = req_string(args, "tokenOut")
    amount_in = req_amount(args, "amountIn")
    min_amount_out = req_amount(args, "minAmountOut")
    fee = opt_int(args, "fee", DEFAULT_FEE)
    _check_fee(fee)
    slippage = opt_number(args, "slippagePercent", DEFAULT_SLIPPAGE_PERCENT)

    spec_in, spec_min_out = await asyncio.gather(
      resolve_amount(ctx, token_in, amount_in),
      resolve_amount(ctx, token_out, min_amount_out),
    )
    value = spec_in.base_units if ctx.profile.is_weth(token_in) else 0

    outcome = await ctx.client.exact_input_single(
      session.account,
      token_in,
      token_out,
      fee,
      spec_in.base_units,
      spec_min_out.base_units,
      value=value,
    )
  except Exception as e:
    raise wrap_failure(SwapReverted, "execute swap", e)

  log.info("Swap confirmed in block %d: %s", outcome.block_number, outcome.tx_hash)
  lines = [
    "✅ Swap Successful!",
    "",
    f"Transaction Hash: {outcome.tx_hash}",
    f"Explorer: {ctx.profile.tx_url(outcome.tx_hash)}",
    "",
    f"Swapped {amount_in} → {min_amount_out} (minimum)",
    f"Slippage tolerance: {slippage:g}% (minAmountOut used as given)",
  ]
  return ToolResult(content="\n".join(lines))
