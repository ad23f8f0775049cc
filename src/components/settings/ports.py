"""
Settings component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import ButtonSettings


class SettingsStorePort(Protocol):
    """Key-value store holding the single settings record."""

    def load(self) -> ButtonSettings | None:
        """Get the stored record, or None if never saved."""
        ...

    def save(self, settings: ButtonSettings) -> None:
        """Save the record (upsert)."""
        ...
