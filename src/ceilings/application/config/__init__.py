"""Configuration schema and loading system for ceiling lighting plans.

Public API:
    - LightingConfiguration: Root configuration model
    - PlainConfigSchema, PeripheralConfigSchema, IslandConfigSchema,
      CombinedConfigSchema: Ceiling section models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_domain: Convert a configuration to calculator input
    - validate_config: Perform full configuration validation
    - ValidationResult, ValidationError, ValidationWarning: Validation results

Example:
    >>> from pathlib import Path
    >>> from ceilings.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("living-room.json"))
    ...     print(f"Ceiling type: {config.ceiling_type.value}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from ceilings.application.config.adapter import (
    combined_to_domain,
    config_to_domain,
    island_to_domain,
    peripheral_to_domain,
    plain_to_domain,
)
from ceilings.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from ceilings.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CombinedConfigSchema,
    IslandConfigSchema,
    LightingConfiguration,
    PeripheralConfigSchema,
    PlainConfigSchema,
    RoomDimensionsConfig,
    SidesConfig,
)
from ceilings.application.config.validator import validate_config
from ceilings.application.config.validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CombinedConfigSchema",
    "ConfigError",
    "IslandConfigSchema",
    "LightingConfiguration",
    "PeripheralConfigSchema",
    "PlainConfigSchema",
    "RoomDimensionsConfig",
    "SidesConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "combined_to_domain",
    "config_to_domain",
    "island_to_domain",
    "load_config",
    "load_config_from_dict",
    "peripheral_to_domain",
    "plain_to_domain",
    "validate_config",
]
