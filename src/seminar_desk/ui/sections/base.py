"""
Protocols shared by content panels.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Refreshable(Protocol):
    """A panel that can reload its data on demand."""

    def refresh(self) -> None: ...
