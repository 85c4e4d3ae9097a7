"""
Network profiles: chain identity, RPC endpoints and Uniswap v3 contract
addresses for each supported deployment.

A profile is built once at startup (built-in key, JSON file, env override)
and never mutated afterwards.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger("skill.uniswap.networks")

ENV_NETWORK = "UNISWAP_NETWORK"
ENV_RPC_URL = "UNISWAP_RPC_URL"

DEFAULT_NETWORK = "unichain-sepolia"


class ContractAddresses(BaseModel):
  model_config = ConfigDict(frozen=True)

  swap_router: str = Field(description="SwapRouter (exactInputSingle) address")
  quoter: str = Field(description="QuoterV2 address")
  weth: str = Field(description="Wrapped native token (WETH9) address")
  usdc: str = Field(description="Reference stablecoin address")


class NetworkProfile(BaseModel):
  """Static chain identity and contract addresses."""

  model_config = ConfigDict(frozen=True)

  key: str
  name: str
  chain_id: int
  rpc_url: str
  fallback_rpc_urls: list[str] = Field(default_factory=list)
  explorer_url: str
  native_symbol: str = "ETH"
  contracts: ContractAddresses
  balance_timeout: float = 10.0
  network_info_timeout: float = 15.0
  request_timeout: float = 30.0

  def is_weth(self, token_address: str) -> bool:
    return token_address.lower() == self.contracts.weth.lower()

  def is_native_marker(self, token: str) -> bool:
    return token.lower() == self.native_symbol.lower()

  def tx_url(self, tx_hash: str) -> str:
    return f"{self.explorer_url.rstrip('/')}/tx/{tx_hash}"


# ---------------------------------------------------------------------------
# Built-in deployments
# ---------------------------------------------------------------------------

UNICHAIN_SEPOLIA = NetworkProfile(
  key="unichain-sepolia",
  name="Unichain Sepolia",
  chain_id=1301,
  rpc_url="https://sepolia.rpc.unichain.org",
  explorer_url="https://sepolia.uniscan.xyz",
  contracts=ContractAddresses(
    swap_router="0x94cC0AaC535CCDB3C01d6787D6413C739ae12bc4",
    quoter="0xc694a4cf10e2e4f77b49c35c5e6ea1b0fde6f6e8",
    weth="0x4200000000000000000000000000000000000006",
    usdc="0xEea1BafFF6A3842ca8C9E86a82E7b26Fc81c8ECa",
  ),
)

ETHEREUM_SEPOLIA = NetworkProfile(
  key="ethereum-sepolia",
  name="Ethereum Sepolia",
  chain_id=11155111,
  rpc_url="https://sepolia.infura.io/v3/9aa3d95b3bc440fa88ea12eaa4456161",
  fallback_rpc_urls=[
    "https://rpc.sepolia.org",
    "https://sepolia.gateway.tenderly.co",
  ],
  explorer_url="https://sepolia.etherscan.io",
  contracts=ContractAddresses(
    swap_router="0xE592427A0AEce92De3Edee1F18E0157C05861564",
    quoter="0xb27308f9F90D607463bb33eA1BeBb41C27CE5AB6",
    weth="0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
    usdc="0x1c7D4B196Cb0C7B01d743Fbc6116a25637902743",
  ),
)

NETWORKS: dict[str, NetworkProfile] = {
  UNICHAIN_SEPOLIA.key: UNICHAIN_SEPOLIA,
  ETHEREUM_SEPOLIA.key: ETHEREUM_SEPOLIA,
}


def get_network(key: str) -> NetworkProfile:
  """Look up a built-in profile by key."""
  profile = NETWORKS.get(key.strip().lower())
  if profile is None:
    known = ", ".join(sorted(NETWORKS))
    raise ValueError(f"Unknown network: {key} (known: {known})")
  return profile


def load_profile_file(path: str | Path) -> NetworkProfile:
  """Read a full profile from a JSON file."""
  raw = Path(path).read_text(encoding="utf-8")
  return NetworkProfile.model_validate(json.loads(raw))


def resolve_profile(
  network: str | None = None,
  config_path: str | Path | None = None,
  rpc_url: str | None = None,
) -> NetworkProfile:
  """
  Build the active profile from CLI options and environment.

  Precedence: ``config_path`` over ``network`` over ``UNISWAP_NETWORK``
  over the default. ``rpc_url`` (or ``UNISWAP_RPC_URL``) replaces the
  profile's primary endpoint.
  """
  if config_path:
    profile = load_profile_file(config_path)
    log.info("Loaded network profile from %s", config_path)
  else:
    profile = get_network(network or os.environ.get(ENV_NETWORK) or DEFAULT_NETWORK)

  override = rpc_url or os.environ.get(ENV_RPC_URL, "").strip()
  if override:
    profile = profile.model_copy(update={"rpc_url": override})
    log.info("RPC endpoint overridden for %s", profile.name)

  return profile
