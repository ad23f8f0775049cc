"""
Settings component - Chat button settings management.
"""

from ._sanitize import (
    flags_from_payload,
    normalize_time,
    sanitize_active_days,
    sanitize_page_ids,
    sanitize_post_types,
    sanitize_settings,
    sanitize_special,
)
from ._schema import (
    DEFAULT_POSITION,
    OPTION_KEY,
    POSITIONS,
    SCHEDULE_SENTINEL,
    SPECIAL_PAGES,
    SUBMITTED_TIME_FROM,
    SUBMITTED_TIME_TO,
    VALID_WEEKDAYS,
    VISIBILITY_SENTINEL,
    get_default_settings,
)
from .component import (
    run,
    run_get,
    run_install,
    run_sanitize,
    run_submit,
)
from .models import (
    GetSettingsInput,
    GetSettingsOutput,
    GroupFlags,
    InstallDefaultsInput,
    InstallDefaultsOutput,
    SanitizeSettingsInput,
    SanitizeSettingsOutput,
    SubmitSettingsInput,
    SubmitSettingsOutput,
)
from .ports import SettingsStorePort

__all__ = [
    # Component entry points
    "run",
    "run_get",
    "run_sanitize",
    "run_submit",
    "run_install",
    # Models
    "GroupFlags",
    "GetSettingsInput",
    "GetSettingsOutput",
    "SanitizeSettingsInput",
    "SanitizeSettingsOutput",
    "SubmitSettingsInput",
    "SubmitSettingsOutput",
    "InstallDefaultsInput",
    "InstallDefaultsOutput",
    # Ports
    "SettingsStorePort",
    # Functions
    "get_default_settings",
    "sanitize_settings",
    "flags_from_payload",
    "normalize_time",
    "sanitize_active_days",
    "sanitize_post_types",
    "sanitize_page_ids",
    "sanitize_special",
    # Constants
    "OPTION_KEY",
    "POSITIONS",
    "DEFAULT_POSITION",
    "VALID_WEEKDAYS",
    "SPECIAL_PAGES",
    "SUBMITTED_TIME_FROM",
    "SUBMITTED_TIME_TO",
    "SCHEDULE_SENTINEL",
    "VISIBILITY_SENTINEL",
]
