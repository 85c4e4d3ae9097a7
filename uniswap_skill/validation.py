"""
Input readers for tool arguments.

Arguments are not checked against the tool schemas before dispatch; a
handler calls these when it needs a value, so a missing field surfaces as
a failure of that handler.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
  pass


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return v.strip()


def req_amount(args: dict[str, Any], key: str) -> str:
  """Read a required decimal amount; numbers are accepted and stringified."""
  v = args.get(key)
  if isinstance(v, (int, float)) and not isinstance(v, bool):
    return str(v)
  return req_string(args, key)


def opt_amount(args: dict[str, Any], key: str, fallback: str) -> str:
  """
  Read an optional decimal amount; numbers are accepted and stringified.

  Only an absent, null or blank value takes the fallback. Any other
  non-string value is rejected.
  """
  v = args.get(key)
  if v is None or (isinstance(v, str) and not v.strip()):
    return fallback
  if isinstance(v, (int, float)) and not isinstance(v, bool):
    return str(v)
  if isinstance(v, str):
    return v.strip()
  raise ValidationError(f"Parameter {key} must be a decimal string or number, got {v!r}")


def opt_number(args: dict[str, Any], key: str, fallback: int | float) -> int | float:
  """Read an optional number from args; zero and non-numbers fall back."""
  v = args.get(key)
  if isinstance(v, bool):
    return fallback
  if isinstance(v, (int, float)) and v:
    return v
  if isinstance(v, str) and v.strip():
    try:
      parsed = float(v)
    except ValueError as exc:
      raise ValidationError(f"Parameter {key} must be a number, got {v!r}") from exc
    return int(parsed) if parsed.is_integer() else parsed
  return fallback


def opt_int(args: dict[str, Any], key: str, fallback: int) -> int:
  """Read an optional integer (e.g. a fee tier)."""
  v = opt_number(args, key, fallback)
  if isinstance(v, float):
    if not v.is_integer():
      raise ValidationError(f"Parameter {key} must be an integer, got {v}")
    return int(v)
  return v
