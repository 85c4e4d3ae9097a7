"""
Uniswap skill entry point: starts the MCP server on stdio.

Run with: python -m uniswap_skill [--network ethereum-sepolia]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from mcp.server.stdio import stdio_server

from .handlers import Dispatcher
from .networks import NETWORKS, resolve_profile
from .server import create_mcp_server

log = logging.getLogger("skill.uniswap")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(prog="uniswap-skill", description=__doc__)
  parser.add_argument(
    "--network",
    choices=sorted(NETWORKS),
    help="Built-in network profile (default: $UNISWAP_NETWORK or unichain-sepolia)",
  )
  parser.add_argument("--config", help="JSON file with a full network profile")
  parser.add_argument("--rpc-url", help="Override the profile's RPC endpoint")
  parser.add_argument(
    "--log-level",
    default=os.environ.get("UNISWAP_LOG_LEVEL", "INFO"),
    help="Logging level (default: INFO)",
  )
  return parser.parse_args(argv)


async def serve(dispatcher: Dispatcher) -> None:
  """Start the MCP server."""
  server = create_mcp_server(dispatcher)
  async with stdio_server() as (read_stream, write_stream):
    await server.run(read_stream, write_stream, server.create_initialization_options())


def main(argv: list[str] | None = None) -> None:
  args = parse_args(argv)
  logging.basicConfig(
    level=args.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
  )

  profile = resolve_profile(network=args.network, config_path=args.config, rpc_url=args.rpc_url)
  log.info("Uniswap MCP server running on stdio (%s)", profile.name)
  asyncio.run(serve(Dispatcher(profile)))


if __name__ == "__main__":
  main()
