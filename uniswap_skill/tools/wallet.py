"""
Wallet and token tools.
"""

from __future__ import annotations

from mcp.types import Tool

wallet_tools: list[Tool] = [
  Tool(
    name="connect_wallet",
    description="Connect a wallet using a private key",
    inputSchema={
      "type": "object",
      "properties": {
        "privateKey": {
          "type": "string",
          "description": "Private key for wallet connection",
        },
      },
      "required": ["privateKey"],
    },
  ),
  Tool(
    name="get_balance",
    description="Get token balance for an address",
    inputSchema={
      "type": "object",
      "properties": {
        "address": {
          "type": "string",
          "description": "Wallet address to check balance for",
        },
        "tokenAddress": {
          "type": "string",
          "description": "Token contract address or 'ETH' for native ETH",
        },
      },
      "required": ["address", "tokenAddress"],
    },
  ),
  Tool(
    name="approve_token",
    description="Approve token spending for Uniswap router",
    inputSchema={
      "type": "object",
      "properties": {
        "tokenAddress": {
          "type": "string",
          "description": "Token contract address to approve",
        },
        "amount": {
          "type": "string",
          "description": "Amount to approve ('max' for unlimited)",
          "default": "max",
        },
      },
      "required": ["tokenAddress"],
    },
  ),
]
