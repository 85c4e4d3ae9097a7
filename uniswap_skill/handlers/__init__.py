"""
Tool handler dispatcher.

Every outcome, including unknown tools and handler failures, comes back as
a ToolResult; failures carry ``Error: <message>`` text and an ErrorKind.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..client import ChainClient
from ..helpers import MissingArguments, SkillError, ToolResult, UnknownTool, error_result
from ..state import SessionStore
from ..tools import ALL_TOOLS
from .context import SkillContext
from .network import get_network_info
from .trading import execute_swap, get_quote
from .wallet import approve_token, connect_wallet, get_balance

if TYPE_CHECKING:
  from collections.abc import Awaitable, Callable

  from mcp.types import Tool

  from ..networks import NetworkProfile

  Handler = Callable[[SkillContext, dict[str, Any]], Awaitable[ToolResult]]

log = logging.getLogger("skill.uniswap.handlers")

HANDLERS: dict[str, Handler] = {
  # Wallet
  "connect_wallet": connect_wallet,
  "get_balance": get_balance,
  "approve_token": approve_token,
  # Trading
  "get_quote": get_quote,
  "execute_swap": execute_swap,
  # Network
  "get_network_info": get_network_info,
}


class Dispatcher:
  """Routes tool calls for one network profile and owns its wallet session."""

  def __init__(
    self,
    profile: NetworkProfile,
    client: ChainClient | None = None,
    session: SessionStore | None = None,
  ) -> None:
    self.ctx = SkillContext(
      profile=profile,
      client=client or ChainClient(profile),
      session=session or SessionStore(),
    )

  @property
  def profile(self) -> NetworkProfile:
    return self.ctx.profile

  @property
  def session(self) -> SessionStore:
    return self.ctx.session

  def list_tools(self) -> list[Tool]:
    return list(ALL_TOOLS)

  async def dispatch(self, tool_name: str, args: dict[str, Any] | None) -> ToolResult:
    """Dispatch a tool call to the appropriate handler."""
    try:
      if args is None:
        raise MissingArguments("No arguments provided")
      handler = HANDLERS.get(tool_name)
      if handler is None:
        raise UnknownTool(f"Unknown tool: {tool_name}")

      log.debug("Calling tool %s", tool_name)
      return await handler(self.ctx, args)
    except SkillError as e:
      log.warning("Tool %s failed [%s]: %s", tool_name, e.kind.value, e)
      return error_result(e)
    except Exception as e:
      log.exception("Tool execution failed: %s", tool_name)
      return error_result(e)


__all__ = ["HANDLERS", "Dispatcher"]
