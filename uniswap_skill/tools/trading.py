"""
Quote and swap tools.
"""

from __future__ import annotations

from mcp.types import Tool

trading_tools: list[Tool] = [
  Tool(
    name="get_quote",
    description="Get a price quote for swapping tokens",
    inputSchema={
      "type": "object",
      "properties": {
        "tokenIn": {
          "type": "string",
          "description": "Input token contract address",
        },
        "tokenOut": {
          "type": "string",
          "description": "Output token contract address",
        },
        "amountIn": {
          "type": "string",
          "description": "Amount to swap (in wei or token units)",
        },
        "fee": {
          "type": "number",
          "description": "Pool fee tier (500, 3000, or 10000)",
          "default": 3000,
        },
      },
      "required": ["tokenIn", "tokenOut", "amountIn"],
    },
  ),
  Tool(
    name="execute_swap",
    description="Execute a token swap on Uniswap",
    inputSchema={
      "type": "object",
      "properties": {
        "tokenIn": {
          "type": "string",
          "description": "Input token contract address",
        },
        "tokenOut": {
          "type": "string",
          "description": "Output token contract address",
        },
        "amountIn": {
          "type": "string",
          "description": "Amount to swap (in wei or token units)",
        },
        "minAmountOut": {
          "type": "string",
          "description": "Minimum acceptable output amount",
        },
        "fee": {
          "type": "number",
          "description": "Pool fee tier (500, 3000, or 10000)",
          "default": 3000,
        },
        "slippagePercent": {
          "type": "number",
          "description": "Slippage tolerance percentage (e.g., 1 for 1%)",
          "default": 1,
        },
      },
      "required": ["tokenIn", "tokenOut", "amountIn", "minAmountOut"],
    },
  ),
]
