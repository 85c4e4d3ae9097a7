import asyncio
from typing import Any

import pytest
import pytest_asyncio

from uniswap_skill.client import QuoteResult, TxOutcome
from uniswap_skill.handlers import Dispatcher
from uniswap_skill.networks import UNICHAIN_SEPOLIA, NetworkProfile

# Well-known development key (Hardhat/Anvil account #0); never funded on a real chain.
TEST_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

WETH = UNICHAIN_SEPOLIA.contracts.weth
USDC = UNICHAIN_SEPOLIA.contracts.usdc
TX_HASH = "0x" + "ab" * 32


class FakeChainClient:
    """In-memory stand-in for ChainClient with the same async surface."""

    def __init__(self, profile: NetworkProfile) -> None:
        self.profile = profile
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.failures: dict[str, BaseException] = {}
        self.delays: dict[str, float] = {}
        self.native_balances: dict[str, int] = {}
        self.tokens: dict[str, dict[str, Any]] = {
            USDC.lower(): {"decimals": 6, "symbol": "USDC", "balances": {}},
        }
        self.quote = QuoteResult(
            amount_out=2_500_000_000,
            sqrt_price_x96_after=0,
            initialized_ticks_crossed=1,
            gas_estimate=84_000,
        )
        self.block_number = 1_234_567
        self.gas_price = 1_500_000_000
        self.chain_id = profile.chain_id

    async def _enter(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))
        if name in self.delays:
            await asyncio.sleep(self.delays[name])
        if name in self.failures:
            raise self.failures[name]

    def called(self, name: str) -> list[tuple[tuple[Any, ...], dict[str, Any]]]:
        return [(args, kwargs) for n, args, kwargs in self.calls if n == name]

    def _token(self, token_address: str) -> dict[str, Any]:
        token = self.tokens.get(token_address.lower())
        if token is None:
            raise RuntimeError("execution reverted (no data)")
        return token

    async def get_native_balance(self, address: str) -> int:
        await self._enter("get_native_balance", address)
        return self.native_balances.get(address.lower(), 0)

    async def get_block_number(self) -> int:
        await self._enter("get_block_number")
        return self.block_number

    async def get_chain_id(self) -> int:
        await self._enter("get_chain_id")
        return self.chain_id

    async def get_gas_price(self) -> int:
        await self._enter("get_gas_price")
        return self.gas_price

    async def token_decimals(self, token_address: str) -> int:
        await self._enter("token_decimals", token_address)
        return self._token(token_address)["decimals"]

    async def token_symbol(self, token_address: str) -> str:
        await self._enter("token_symbol", token_address)
        return self._token(token_address)["symbol"]

    async def token_balance(self, token_address: str, owner: str) -> int:
        await self._enter("token_balance", token_address, owner)
        return self._token(token_address)["balances"].get(owner.lower(), 0)

    async def quote_exact_input_single(
        self, token_in: str, token_out: str, fee: int, amount_in: int
    ) -> QuoteResult:
        await self._enter("quote_exact_input_single", token_in, token_out, fee, amount_in)
        return self.quote

    async def exact_input_single(self, account: Any, *args: Any, **kwargs: Any) -> TxOutcome:
        await self._enter("exact_input_single", account, *args, **kwargs)
        return TxOutcome(tx_hash=TX_HASH, block_number=42, gas_used=120_000)

    async def approve(self, account: Any, token_address: str, spender: str, amount: int) -> TxOutcome:
        await self._enter("approve", account, token_address, spender, amount)
        return TxOutcome(tx_hash=TX_HASH, block_number=43, gas_used=46_000)


@pytest.fixture
def profile() -> NetworkProfile:
    return UNICHAIN_SEPOLIA.model_copy(update={"balance_timeout": 0.05, "network_info_timeout": 0.05})


@pytest.fixture
def chain(profile: NetworkProfile) -> FakeChainClient:
    return FakeChainClient(profile)


@pytest.fixture
def dispatcher(profile: NetworkProfile, chain: FakeChainClient) -> Dispatcher:
    return Dispatcher(profile, client=chain)  # type: ignore[arg-type]


@pytest_asyncio.fixture
async def connected(dispatcher: Dispatcher) -> Dispatcher:
    result = await dispatcher.dispatch("connect_wallet", {"privateKey": TEST_KEY})
    assert not result.is_error
    return dispatcher
