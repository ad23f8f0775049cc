"""
Settings component - Chat button settings management.

Provides the single settings record with fallback defaults, the partial-update
merge used by admin tab submissions, and first-activation install.

Invariants:
- I1: The returned record is always fully populated
- I2: Submitting one tab never wipes another tab's fields
- I3: Sanitizing the same submission twice gives the same record
"""

from __future__ import annotations

import logging

from ._sanitize import flags_from_payload, sanitize_settings
from ._schema import get_default_settings
from .models import (
    GetSettingsInput,
    GetSettingsOutput,
    InstallDefaultsInput,
    InstallDefaultsOutput,
    SanitizeSettingsInput,
    SanitizeSettingsOutput,
    SubmitSettingsInput,
    SubmitSettingsOutput,
)
from .ports import SettingsStorePort

logger = logging.getLogger(__name__)


# --- Component Entry Points ---


def run_get(
    inp: GetSettingsInput,
    *,
    store: SettingsStorePort,
) -> GetSettingsOutput:
    """
    Get current settings.

    Always returns settings - uses defaults if the store holds no record.
    """
    settings = store.load()
    if settings is None:
        settings = get_default_settings()
    return GetSettingsOutput(settings=settings)


def run_sanitize(inp: SanitizeSettingsInput) -> SanitizeSettingsOutput:
    """
    Merge a submission into previous settings without touching any store.

    Args:
        inp: Previous record, raw incoming fields and group flags.

    Returns:
        SanitizeSettingsOutput with the merged record.
    """
    return SanitizeSettingsOutput(
        settings=sanitize_settings(inp.previous, inp.incoming, inp.flags),
    )


def run_submit(
    inp: SubmitSettingsInput,
    *,
    store: SettingsStorePort,
) -> SubmitSettingsOutput:
    """
    Handle a raw admin form submission.

    The tab sentinels are read from the payload itself, the result is merged
    over the stored record and saved.
    """
    flags = flags_from_payload(inp.payload)
    merged = sanitize_settings(store.load(), inp.payload, flags)
    store.save(merged)
    logger.info(
        "Settings saved (schedule=%s, visibility=%s)",
        flags.schedule_submitted,
        flags.visibility_submitted,
    )
    return SubmitSettingsOutput(settings=merged)


def run_install(
    inp: InstallDefaultsInput,
    *,
    store: SettingsStorePort,
) -> InstallDefaultsOutput:
    """
    Store default settings on first activation.

    An existing record is left untouched.
    """
    existing = store.load()
    if existing is not None:
        return InstallDefaultsOutput(settings=existing, created=False)

    defaults = get_default_settings()
    store.save(defaults)
    logger.info("Installed default chat button settings")
    return InstallDefaultsOutput(settings=defaults, created=True)


def run(
    inp: GetSettingsInput | SanitizeSettingsInput | SubmitSettingsInput | InstallDefaultsInput,
    *,
    store: SettingsStorePort | None = None,
) -> GetSettingsOutput | SanitizeSettingsOutput | SubmitSettingsOutput | InstallDefaultsOutput:
    """
    Main entry point for the settings component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SanitizeSettingsInput):
        return run_sanitize(inp)
    if store is None:
        raise ValueError(f"A settings store is required for {type(inp).__name__}")
    if isinstance(inp, GetSettingsInput):
        return run_get(inp, store=store)
    elif isinstance(inp, SubmitSettingsInput):
        return run_submit(inp, store=store)
    elif isinstance(inp, InstallDefaultsInput):
        return run_install(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
