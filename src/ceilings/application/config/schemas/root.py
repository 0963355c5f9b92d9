"""Root configuration schema.

This module contains the root LightingConfiguration model, which mirrors
the state object of the ceiling designer: the room, the selected ceiling
type and one optional sub-configuration per type.
"""

from pydantic import Field, field_validator

from ceilings.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    CamelModel,
    CeilingTypeConfig,
    RoomDimensionsConfig,
)
from ceilings.application.config.schemas.ceiling_schema import (
    CombinedConfigSchema,
    IslandConfigSchema,
    PeripheralConfigSchema,
    PlainConfigSchema,
)


class LightingConfiguration(CamelModel):
    """Root configuration model for a ceiling lighting plan.

    Only the sub-configuration matching ``ceiling_type`` is used. The
    others may be present (the designer keeps them around while the user
    switches types) and are ignored.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        room_dimensions: Room width, length and height in feet
        ceiling_type: Selected ceiling type
        plain_config: Plain ceiling layout (optional)
        peripheral_config: Peripheral band layout (optional)
        island_config: Island layout (optional)
        combined_config: Layered layout (optional)

    Example:
        >>> config = LightingConfiguration(
        ...     room_dimensions=RoomDimensionsConfig(width=12, length=15),
        ...     ceiling_type="plain",
        ...     plain_config=PlainConfigSchema(width=9.6, length=12),
        ... )
    """

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    room_dimensions: RoomDimensionsConfig
    ceiling_type: CeilingTypeConfig
    plain_config: PlainConfigSchema | None = None
    peripheral_config: PeripheralConfigSchema | None = None
    island_config: IslandConfigSchema | None = None
    combined_config: CombinedConfigSchema | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
