"""
sitecheck config package public API.

File: src/sitecheck/config/__init__.py

Purpose
- Export settings loading/validation entrypoints.
"""

from sitecheck.config.loader import load_settings, merge_settings
from sitecheck.config.schema import (
    DEFAULT_SETTINGS,
    LOG_LEVELS,
    SettingsValidationIssue,
    SettingsValidationResult,
    SiteCheckSettings,
    assert_valid_settings,
    default_settings,
    validate_settings,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "LOG_LEVELS",
    "SettingsValidationIssue",
    "SettingsValidationResult",
    "SiteCheckSettings",
    "assert_valid_settings",
    "default_settings",
    "load_settings",
    "merge_settings",
    "validate_settings",
]
