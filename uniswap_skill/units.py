"""
Conversion between human-readable token amounts and integer base units.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext

# Largest value an ERC20 uint256 allowance can hold.
MAX_UINT256 = 2**256 - 1

NATIVE_DECIMALS = 18
GWEI_DECIMALS = 9


@dataclass(frozen=True)
class AmountSpec:
  amount: str
  decimals: int
  base_units: int


def to_base_units(amount: str | int | float, decimals: int) -> int:
  """Parse a decimal amount string into integer base units.

  Rejects negative values and values with more fractional digits than
  ``decimals`` allows.
  """
  text = str(amount).strip()
  try:
    value = Decimal(text)
  except InvalidOperation as exc:
    raise ValueError(f"invalid decimal amount: {amount!r}") from exc

  if not value.is_finite():
    raise ValueError(f"invalid decimal amount: {amount!r}")
  if value < 0:
    raise ValueError(f"amount must not be negative: {amount!r}")

  with localcontext() as ctx:
    ctx.prec = 160
    scaled = value.scaleb(decimals)
  if scaled != scaled.to_integral_value():
    raise ValueError(f"too many decimals for format: {amount!r} ({decimals} decimals)")
  base_units = int(scaled)
  if base_units > MAX_UINT256:
    raise ValueError(f"amount overflows uint256: {amount!r}")
  return base_units


def from_base_units(value: int, decimals: int) -> str:
  """Render integer base units as a decimal string, keeping at least one
  fractional digit (``1.0``, ``0.5``, ``1234.000001``)."""
  negative = value < 0
  whole, frac = divmod(abs(int(value)), 10**decimals)
  if decimals:
    frac_text = str(frac).rjust(decimals, "0").rstrip("0") or "0"
  else:
    frac_text = "0"
  return f"{'-' if negative else ''}{whole}.{frac_text}"


def amount_spec(amount: str, decimals: int) -> AmountSpec:
  return AmountSpec(amount=amount, decimals=decimals, base_units=to_base_units(amount, decimals))
