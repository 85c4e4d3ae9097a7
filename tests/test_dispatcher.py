import pytest

from uniswap_skill.handlers import HANDLERS, Dispatcher
from uniswap_skill.helpers import ErrorKind, ToolResult

EXPECTED_REQUIRED = {
    "connect_wallet": {"privateKey"},
    "get_balance": {"address", "tokenAddress"},
    "get_quote": {"tokenIn", "tokenOut", "amountIn"},
    "execute_swap": {"tokenIn", "tokenOut", "amountIn", "minAmountOut"},
    "approve_token": {"tokenAddress"},
    "get_network_info": set(),
}


def test_list_tools_returns_the_six_tools(dispatcher: Dispatcher) -> None:
    tools = dispatcher.list_tools()
    assert [t.name for t in tools] == [
        "connect_wallet",
        "get_balance",
        "approve_token",
        "get_quote",
        "execute_swap",
        "get_network_info",
    ]
    for tool in tools:
        assert tool.inputSchema["type"] == "object"
        assert set(tool.inputSchema.get("required", [])) == EXPECTED_REQUIRED[tool.name]


def test_every_listed_tool_has_a_handler(dispatcher: Dispatcher) -> None:
    assert {t.name for t in dispatcher.list_tools()} == set(HANDLERS)


def test_tool_defaults_are_declared(dispatcher: Dispatcher) -> None:
    schemas = {t.name: t.inputSchema["properties"] for t in dispatcher.list_tools()}
    assert schemas["get_quote"]["fee"]["default"] == 3000
    assert schemas["execute_swap"]["slippagePercent"]["default"] == 1
    assert schemas["approve_token"]["amount"]["default"] == "max"


@pytest.mark.asyncio
async def test_listing_is_independent_of_session(connected: Dispatcher, dispatcher: Dispatcher) -> None:
    fresh = Dispatcher(dispatcher.profile, client=dispatcher.ctx.client)
    assert [t.name for t in connected.list_tools()] == [t.name for t in fresh.list_tools()]


@pytest.mark.asyncio
async def test_missing_arguments_fails_before_dispatch(dispatcher: Dispatcher, chain) -> None:
    result = await dispatcher.dispatch("get_network_info", None)
    assert result == ToolResult(
        content="Error: No arguments provided",
        is_error=True,
        error_kind=ErrorKind.MISSING_ARGUMENTS,
    )
    assert chain.calls == []


@pytest.mark.asyncio
async def test_unknown_tool(dispatcher: Dispatcher) -> None:
    result = await dispatcher.dispatch("bridge_tokens", {})
    assert result.content == "Error: Unknown tool: bridge_tokens"
    assert result.error_kind is ErrorKind.UNKNOWN_TOOL


@pytest.mark.asyncio
async def test_missing_required_field_surfaces_inside_handler(dispatcher: Dispatcher) -> None:
    result = await dispatcher.dispatch("get_quote", {"tokenIn": "0x1"})
    assert result.is_error
    assert result.content == "Error: Failed to get quote: Missing required parameter: tokenOut"
    assert result.error_kind is ErrorKind.QUOTE_FAILED


@pytest.mark.asyncio
async def test_unexpected_handler_exception_is_contained(
    dispatcher: Dispatcher, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def explode(ctx, args):
        raise KeyError("boom")

    monkeypatch.setitem(HANDLERS, "get_network_info", explode)
    result = await dispatcher.dispatch("get_network_info", {})
    assert result.is_error
    assert result.content.startswith("Error: ")
    assert "boom" in result.content
    assert result.error_kind is ErrorKind.INTERNAL


@pytest.mark.asyncio
async def test_service_keeps_serving_after_failures(dispatcher: Dispatcher) -> None:
    await dispatcher.dispatch("nope", {})
    await dispatcher.dispatch("execute_swap", {})
    result = await dispatcher.dispatch("get_network_info", {})
    assert not result.is_error
    assert "Chain ID: 1301" in result.content
