"""
Pydantic configuration schema for Kickstart.

This module defines all configuration models with validation.
"""

from pathlib import Path
from typing import Literal

from prompt_toolkit.keys import KEY_ALIASES, Keys
from pydantic import BaseModel, ConfigDict, Field, field_validator

from kickstart.wizard.keyboard import DEFAULT_BACK_KEYS

# Multi-character key names prompt_toolkit accepts in key bindings
KEY_NAMES = frozenset(key.value for key in Keys) | frozenset(KEY_ALIASES) | {"space"}

# =============================================================================
# Wizard Configuration
# =============================================================================


class WizardConfig(BaseModel):
    """Interactive wizard behaviour."""

    model_config = ConfigDict(extra="allow")

    back_keys: list[str] = Field(default_factory=lambda: list(DEFAULT_BACK_KEYS))
    keyboard_shortcuts: bool = True
    show_logo: bool = True
    default_package_manager: Literal["npm", "yarn"] | None = None

    @field_validator("back_keys", mode="before")
    @classmethod
    def _split_keys(cls, value):
        if isinstance(value, str):
            return [key.strip() for key in value.split(",") if key.strip()]
        return value

    @field_validator("back_keys")
    @classmethod
    def _check_keys(cls, value: list[str]) -> list[str]:
        unknown = [key for key in value if len(key) != 1 and key not in KEY_NAMES]
        if unknown:
            raise ValueError(f"Unknown key name(s): {', '.join(unknown)}")
        return value


# =============================================================================
# UI Configuration
# =============================================================================


class UIConfig(BaseModel):
    """Console output settings."""

    model_config = ConfigDict(extra="allow")

    color: bool = True


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Diagnostic logging settings."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: Path | None = None
    to_file: bool = False  # use the default log path when no file is set

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


# =============================================================================
# Root Configuration
# =============================================================================


class Config(BaseModel):
    """Root Kickstart configuration."""

    model_config = ConfigDict(extra="allow")

    wizard: WizardConfig = Field(default_factory=WizardConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
