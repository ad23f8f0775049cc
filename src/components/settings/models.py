"""
Settings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import ButtonSettings


@dataclass(frozen=True)
class GroupFlags:
    """Which optional field groups accompanied a submission."""

    schedule_submitted: bool = False
    visibility_submitted: bool = False


@dataclass(frozen=True)
class GetSettingsInput:
    """Input for getting settings."""

    pass


@dataclass(frozen=True)
class GetSettingsOutput:
    """Output from getting settings."""

    settings: ButtonSettings


@dataclass(frozen=True)
class SanitizeSettingsInput:
    """Input for merging a raw submission into previous settings."""

    previous: ButtonSettings | None
    incoming: dict[str, Any] = field(default_factory=dict)
    flags: GroupFlags = field(default_factory=GroupFlags)


@dataclass(frozen=True)
class SanitizeSettingsOutput:
    """Output from sanitizing a submission."""

    settings: ButtonSettings


@dataclass(frozen=True)
class SubmitSettingsInput:
    """Input for a raw admin form submission (sentinels included in the payload)."""

    payload: dict[str, Any]


@dataclass(frozen=True)
class SubmitSettingsOutput:
    """Output from a submission: the record that was saved."""

    settings: ButtonSettings


@dataclass(frozen=True)
class InstallDefaultsInput:
    """Input for first-activation install."""

    pass


@dataclass(frozen=True)
class InstallDefaultsOutput:
    """Output from install. created is False when a record already existed."""

    settings: ButtonSettings
    created: bool
