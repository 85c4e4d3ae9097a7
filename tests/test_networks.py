import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from uniswap_skill.networks import (
    ETHEREUM_SEPOLIA,
    UNICHAIN_SEPOLIA,
    get_network,
    load_profile_file,
    resolve_profile,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UNISWAP_NETWORK", raising=False)
    monkeypatch.delenv("UNISWAP_RPC_URL", raising=False)


def test_builtin_profiles_match_deployments() -> None:
    assert UNICHAIN_SEPOLIA.chain_id == 1301
    assert UNICHAIN_SEPOLIA.rpc_url == "https://sepolia.rpc.unichain.org"
    assert UNICHAIN_SEPOLIA.contracts.weth == "0x4200000000000000000000000000000000000006"
    assert ETHEREUM_SEPOLIA.chain_id == 11155111
    assert ETHEREUM_SEPOLIA.explorer_url == "https://sepolia.etherscan.io"
    assert ETHEREUM_SEPOLIA.contracts.swap_router == "0xE592427A0AEce92De3Edee1F18E0157C05861564"
    assert ETHEREUM_SEPOLIA.fallback_rpc_urls == [
        "https://rpc.sepolia.org",
        "https://sepolia.gateway.tenderly.co",
    ]


def test_profiles_are_immutable() -> None:
    with pytest.raises(ValidationError):
        UNICHAIN_SEPOLIA.chain_id = 1  # type: ignore[misc]


def test_weth_and_native_marker_match_case_insensitively() -> None:
    assert ETHEREUM_SEPOLIA.is_weth("0xfff9976782d46cc05630d1f6ebab18b2324d6b14")
    assert not ETHEREUM_SEPOLIA.is_weth(ETHEREUM_SEPOLIA.contracts.usdc)
    assert UNICHAIN_SEPOLIA.is_native_marker("eth")
    assert UNICHAIN_SEPOLIA.is_native_marker("ETH")
    assert not UNICHAIN_SEPOLIA.is_native_marker("WETH")


def test_tx_url_joins_explorer() -> None:
    assert ETHEREUM_SEPOLIA.tx_url("0xabc") == "https://sepolia.etherscan.io/tx/0xabc"


def test_get_network_unknown_key() -> None:
    with pytest.raises(ValueError, match="Unknown network: mainnet"):
        get_network("mainnet")


def test_resolve_profile_default_and_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_profile() is UNICHAIN_SEPOLIA
    monkeypatch.setenv("UNISWAP_NETWORK", "ethereum-sepolia")
    assert resolve_profile() is ETHEREUM_SEPOLIA
    assert resolve_profile(network="unichain-sepolia") is UNICHAIN_SEPOLIA


def test_resolve_profile_rpc_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNISWAP_RPC_URL", "http://localhost:8545")
    profile = resolve_profile(network="ethereum-sepolia")
    assert profile.rpc_url == "http://localhost:8545"
    assert profile.chain_id == ETHEREUM_SEPOLIA.chain_id
    # built-in left untouched
    assert ETHEREUM_SEPOLIA.rpc_url.startswith("https://sepolia.infura.io")


def test_load_profile_from_json(tmp_path: Path) -> None:
    data = UNICHAIN_SEPOLIA.model_dump()
    data.update(key="local-fork", name="Local Fork", chain_id=31337, rpc_url="http://127.0.0.1:8545")
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    profile = load_profile_file(path)
    assert profile.key == "local-fork"
    assert profile.contracts == UNICHAIN_SEPOLIA.contracts
    assert resolve_profile(network="ethereum-sepolia", config_path=path).chain_id == 31337


def test_load_profile_rejects_missing_contracts(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"key": "x", "name": "X", "chain_id": 1, "rpc_url": "u", "explorer_url": "e"}))
    with pytest.raises(ValidationError):
        load_profile_file(path)
