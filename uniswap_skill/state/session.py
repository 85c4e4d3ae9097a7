"""
Wallet session held by a dispatcher instance.

At most one signing account per process. A later connect replaces the
previous one; nothing is written to disk.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..helpers import NotConnected

if TYPE_CHECKING:
  from eth_account.signers.local import LocalAccount


@dataclass(frozen=True)
class Session:
  account: LocalAccount
  connected_at: float = field(default_factory=time.time)

  @property
  def address(self) -> str:
    return self.account.address


class SessionStore:
  """Single-writer holder for the connected wallet."""

  def __init__(self) -> None:
    self._session: Session | None = None

  @property
  def current(self) -> Session | None:
    return self._session

  @property
  def is_connected(self) -> bool:
    return self._session is not None

  def connect(self, account: LocalAccount) -> Session:
    self._session = Session(account=account)
    return self._session

  def require(self) -> Session:
    if self._session is None:
      raise NotConnected()
    return self._session
