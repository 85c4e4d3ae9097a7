"""
Uniswap v3 skill: MCP tools for wallets, balances, quotes, swaps,
approvals and network info.
"""

__version__ = "1.0.0"
