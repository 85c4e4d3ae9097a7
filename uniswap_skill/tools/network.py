"""
Network information tool.
"""

from __future__ import annotations

from mcp.types import Tool

network_tools: list[Tool] = [
  Tool(
    name="get_network_info",
    description="Get current network information and configuration",
    inputSchema={"type": "object", "properties": {}},
  ),
]
