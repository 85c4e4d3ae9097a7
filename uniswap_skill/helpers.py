"""
Shared result type and error taxonomy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorKind(str, Enum):
  MISSING_ARGUMENTS = "MISSING_ARGUMENTS"
  UNKNOWN_TOOL = "UNKNOWN_TOOL"
  NOT_CONNECTED = "NOT_CONNECTED"
  CONNECT_FAILED = "CONNECT_FAILED"
  TOKEN_QUERY = "TOKEN_QUERY"
  QUOTE_FAILED = "QUOTE_FAILED"
  SWAP_REVERTED = "SWAP_REVERTED"
  APPROVAL_FAILED = "APPROVAL_FAILED"
  RPC_TIMEOUT = "RPC_TIMEOUT"
  INTERNAL = "INTERNAL"


class SkillError(Exception):
  kind: ErrorKind = ErrorKind.INTERNAL


class MissingArguments(SkillError):
  kind = ErrorKind.MISSING_ARGUMENTS


class UnknownTool(SkillError):
  kind = ErrorKind.UNKNOWN_TOOL


class NotConnected(SkillError):
  kind = ErrorKind.NOT_CONNECTED

  def __init__(self, message: str = "Wallet not connected. Please connect wallet first.") -> None:
    super().__init__(message)


class ConnectFailed(SkillError):
  kind = ErrorKind.CONNECT_FAILED


class TokenQueryError(SkillError):
  kind = ErrorKind.TOKEN_QUERY


class QuoteFailed(SkillError):
  kind = ErrorKind.QUOTE_FAILED


class SwapReverted(SkillError):
  kind = ErrorKind.SWAP_REVERTED


class ApprovalFailed(SkillError):
  kind = ErrorKind.APPROVAL_FAILED


class RpcTimeout(SkillError):
  kind = ErrorKind.RPC_TIMEOUT


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False
  error_kind: ErrorKind | None = None


def describe_error(error: BaseException) -> str:
  """Best-effort cause string, preferring a revert reason when web3 gives one."""
  message = getattr(error, "message", None)
  if isinstance(message, str) and message:
    return message
  text = str(error)
  if text:
    return text
  return type(error).__name__


def error_result(error: BaseException) -> ToolResult:
  """Convert any failure into the in-band ``Error: ...`` text result."""
  kind = error.kind if isinstance(error, SkillError) else ErrorKind.INTERNAL

  return ToolResult(content=f"Error: {describe_error(error)}", is_error=True, error_kind=kind)


def wrap_failure(error_cls: type[SkillError], operation: str, error: Exception) -> SkillError:
  """Re-tag ``error`` as ``error_cls`` with ``Failed to <operation>`` context."""
  if isinstance(error, error_cls):
    return error
  wrapped = error_cls(f"Failed to {operation}: {describe_error(error)}")
  wrapped.__cause__ = error
  return wrapped
