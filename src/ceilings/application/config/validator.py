"""Full configuration validation.

Schema validation (types, unknown keys, schema version) happens when the
configuration is loaded. ``validate_config`` runs the layout rules on top
of a loaded configuration.
"""

import logging

from ceilings.application.config.schemas import LightingConfiguration
from ceilings.application.config.validators import (
    IslandCeilingValidator,
    LayoutValidator,
    PeripheralCeilingValidator,
    PlainCeilingValidator,
    ValidationResult,
)

logger = logging.getLogger(__name__)

VALIDATORS = (
    LayoutValidator(),
    PlainCeilingValidator(),
    PeripheralCeilingValidator(),
    IslandCeilingValidator(),
)


def validate_config(config: LightingConfiguration) -> ValidationResult:
    """Perform full validation of a ceiling configuration.

    Args:
        config: A loaded LightingConfiguration

    Returns:
        ValidationResult with all errors and warnings, in validator order
    """
    result = ValidationResult()
    for validator in VALIDATORS:
        partial = validator.validate(config)
        if partial.errors or partial.warnings:
            logger.debug(
                f"Validator '{validator.name}': {len(partial.errors)} error(s), "
                f"{len(partial.warnings)} warning(s)"
            )
        result.merge(partial)
    return result
