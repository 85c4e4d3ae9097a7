"""
Network information handler.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..client import with_timeout
from ..helpers import ToolResult, describe_error
from ..units import GWEI_DECIMALS, from_base_units
from .context import SkillContext

log = logging.getLogger("skill.uniswap.handlers.network")

UNAVAILABLE = "N/A (data unavailable)"


async def get_network_info(ctx: SkillContext, args: dict[str, Any]) -> ToolResult:
  """Static profile fields plus live block height and gas price.

  Live data is bounded by ``profile.network_info_timeout``; on timeout or
  RPC failure the static fields are still returned.
  """
  profile = ctx.profile
  block_text = UNAVAILABLE
  gas_text = UNAVAILABLE
  failure: str | None = None

  try:
    block_number, gas_price = await with_timeout(
      asyncio.gather(ctx.client.get_block_number(), ctx.client.get_gas_price()),
      profile.network_info_timeout,
      "Network data",
    )
    block_text = f"{block_number:,}"
    gas_text = f"{from_base_units(gas_price, GWEI_DECIMALS)} gwei"
  except Exception as e:
    failure = describe_error(e)
    log.warning("Network data unavailable: %s", failure)

  lines = [
    "🌐 Network Information" + (" (Limited)" if failure else ""),
    "",
    f"Network: {profile.name}",
    f"Chain ID: {profile.chain_id}",
    f"RPC: {profile.rpc_url}",
  ]
  if profile.fallback_rpc_urls:
    lines.append(f"Fallback RPCs: {', '.join(profile.fallback_rpc_urls)}")
  lines += [
    f"Explorer: {profile.explorer_url}",
    "",
    f"Current Block: {block_text}",
    f"Gas Price: {gas_text}",
    "",
    "📝 Key Contracts:",
    f"• SwapRouter: {profile.contracts.swap_router}",
    f"• QuoterV2: {profile.contracts.quoter}",
    f"• WETH9: {profile.contracts.weth}",
    f"• USDC: {profile.contracts.usdc}",
  ]
  if failure:
    lines += ["", f"⚠️ RPC connectivity issue: {failure}. Some features may not work properly."]
  return ToolResult(content="\n".join(lines))
