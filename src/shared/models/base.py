"""Base model configuration for all Pydantic models."""

from pydantic import BaseModel, ConfigDict


class FleetBaseModel(BaseModel):
    """Base model with common configuration.

    Conventions:
    - Field names are lowercase snake_case
    - Enums serialize to their values
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )
