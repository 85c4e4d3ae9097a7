"""
Per-dispatcher context shared by all handlers, plus decimals resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..units import NATIVE_DECIMALS, AmountSpec, amount_spec

if TYPE_CHECKING:
  from ..client.chain_client import ChainClient
  from ..networks import NetworkProfile
  from ..state.session import SessionStore


@dataclass
class SkillContext:
  profile: NetworkProfile
  client: ChainClient
  session: SessionStore


async def resolve_decimals(ctx: SkillContext, token_address: str) -> int:
  """18 for the wrapped-native token (no RPC call), else the token's decimals()."""
  if ctx.profile.is_weth(token_address):
    return NATIVE_DECIMALS
  return await ctx.client.token_decimals(token_address)


async def resolve_amount(ctx: SkillContext, token_address: str, amount: str) -> AmountSpec:
  decimals = await resolve_decimals(ctx, token_address)
  return amount_spec(amount, decimals)
