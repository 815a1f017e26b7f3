"""Capabilities shared by every stored record.

Repositories only rely on this structural protocol, never on a common
base class, so each record type stays a plain dataclass.
"""

from __future__ import annotations

from typing import Protocol


class Keyed(Protocol):
    """Anything with an integer identity."""

    @property
    def id(self) -> int: ...
