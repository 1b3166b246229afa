"""
Configuration for Kickstart.

Layered YAML configuration with pydantic validation, plus the defaults
used when the wizard runs non-interactively.
"""

from kickstart.config.defaults import build_answers_from_options, framework_defaults
from kickstart.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    load_config,
    load_yaml_file,
)
from kickstart.config.merger import deep_merge
from kickstart.config.schema import Config, LoggingConfig, UIConfig, WizardConfig

__all__ = [
    "Config",
    "ConfigurationError",
    "LoggingConfig",
    "UIConfig",
    "WizardConfig",
    "apply_env_overrides",
    "build_answers_from_options",
    "deep_merge",
    "framework_defaults",
    "load_config",
    "load_yaml_file",
]
