"""
MCP server for the Uniswap skill.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call;
every tool call answers with a single text item, including failures.
"""

from __future__ import annotations

import logging

from mcp.server import Server
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent, Tool

from . import __version__
from .handlers import Dispatcher

log = logging.getLogger("skill.uniswap.server")


def create_mcp_server(dispatcher: Dispatcher) -> Server:
  """Create and configure the MCP server around a dispatcher."""
  server = Server(f"uniswap-{dispatcher.profile.key}", version=__version__)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return dispatcher.list_tools()

  # Registered on the raw request so a call without an arguments object
  # reaches the dispatcher as None instead of {}. Arguments are not checked
  # against the tool schemas; see validation.py.
  async def call_tool(req: CallToolRequest) -> ServerResult:
    result = await dispatcher.dispatch(req.params.name, req.params.arguments)
    return ServerResult(CallToolResult(content=[TextContent(type="text", text=result.content)]))

  server.request_handlers[CallToolRequest] = call_tool

  log.info("MCP server ready for %s (chain %d)", dispatcher.profile.name, dispatcher.profile.chain_id)
  return server
