"""
Uniswap tool definitions organized by domain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .network import network_tools
from .trading import trading_tools
from .wallet import wallet_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *wallet_tools,
  *trading_tools,
  *network_tools,
]
