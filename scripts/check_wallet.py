#!/usr/bin/env python3
"""
Wallet connectivity check.

Derives the address for a private key, then tries the configured RPC
endpoint for the native balance and the chain id. RPC failures are reported
and do not abort the check.

Usage:
    WALLET_PRIVATE_KEY=0x... python scripts/check_wallet.py [--network ethereum-sepolia]
    python scripts/check_wallet.py --private-key 0x... --rpc-url https://...
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from uniswap_skill.client import ChainClient, account_from_key, with_timeout
from uniswap_skill.networks import NETWORKS, resolve_profile
from uniswap_skill.units import NATIVE_DECIMALS, from_base_units

logging.basicConfig(
    level=logging.WARNING,
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
)

ENV_PRIVATE_KEY = "WALLET_PRIVATE_KEY"


async def check(private_key: str, client: ChainClient, timeout: float) -> int:
    profile = client.profile
    print("Testing wallet connection...\n")

    try:
        account = account_from_key(private_key)
    except Exception as exc:
        print(f"❌ Error: invalid private key ({type(exc).__name__})")
        return 1

    print("✅ Wallet created successfully!")
    print(f"Address: {account.address}")

    try:
        balance = await with_timeout(
            client.get_native_balance(account.address), timeout, "Balance check"
        )
        print(f"Balance: {from_base_units(balance, NATIVE_DECIMALS)} {profile.native_symbol}")
    except Exception as exc:
        print(f"⚠️ Balance check failed (RPC issue): {exc}")

    try:
        chain_id = await with_timeout(client.get_chain_id(), timeout, "Chain id")
        print(f"Network: {profile.name} (Chain ID: {chain_id})")
        if chain_id != profile.chain_id:
            print(f"⚠️ Endpoint reports chain {chain_id}, expected {profile.chain_id}")
    except Exception as exc:
        print(f"⚠️ Network info failed (RPC issue): {exc}")

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Verify wallet connectivity")
    parser.add_argument("--private-key", help=f"Private key (default: ${ENV_PRIVATE_KEY})")
    parser.add_argument("--network", choices=sorted(NETWORKS))
    parser.add_argument("--config", help="JSON file with a full network profile")
    parser.add_argument("--rpc-url", help="Override the profile's RPC endpoint")
    parser.add_argument("--timeout", type=float, help="Seconds to wait per RPC read")
    args = parser.parse_args()

    private_key = args.private_key or os.environ.get(ENV_PRIVATE_KEY, "").strip()
    if not private_key:
        parser.error(f"a private key is required (--private-key or ${ENV_PRIVATE_KEY})")

    profile = resolve_profile(network=args.network, config_path=args.config, rpc_url=args.rpc_url)
    timeout = args.timeout or profile.balance_timeout
    sys.exit(asyncio.run(check(private_key, ChainClient(profile), timeout)))


if __name__ == "__main__":
    main()
