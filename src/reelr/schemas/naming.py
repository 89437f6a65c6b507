"""Pydantic schema for naming.yaml validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

ColonReplacementName = Literal["delete", "dash", "space_dash", "space_dash_space", "smart"]
MultiEpisodeStyleName = Literal[
    "extend", "duplicate", "repeat", "scene", "range", "prefixed_range"
]


class NamingSchema(BaseModel):
    """
    Pydantic schema for naming.yaml validation.

    Validates the file structure at load time, catching:
    - Unknown colon replacement / multi-episode style names
    - Wrong types
    - Unknown keys (with extra="forbid")
    - An empty standard episode format while renaming is enabled

    Template syntax itself is NOT validated here: the renderer treats
    malformed braces as literal text, so any string is a usable pattern.

    The validated data is then converted to the NamingConfig dataclass
    for use throughout the application.
    """

    # Version field (aliased from _version, optional for legacy configs)
    version: str = Field(default="1.0.0", alias="_version", pattern=r"^\d+\.\d+\.\d+$")

    rename_episodes: bool = True
    replace_illegal_characters: bool = True
    colon_replacement_format: ColonReplacementName = "smart"
    multi_episode_style: MultiEpisodeStyleName = "prefixed_range"

    standard_episode_format: str = Field(
        default="{Series Title} - S{season:00}E{episode:00} - {Episode Title} {Quality Full}",
        description="Pattern for episode file names (may contain / or \\ for folders)",
    )
    series_folder_format: str = Field(
        default="{Series Title}",
        description="Pattern for the series root folder",
    )

    @field_validator("colon_replacement_format", "multi_episode_style", mode="before")
    @classmethod
    def normalize_enum_names(cls, v: Any) -> Any:
        """Accept "Space Dash", "space-dash" and friends."""
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_").replace(" ", "_")
        return v

    @model_validator(mode="before")
    @classmethod
    def filter_comments(cls, data: Any) -> Any:
        """Remove top-level comment keys before validation."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not k.startswith("_") or k == "_version"}
        return data

    @model_validator(mode="after")
    def require_standard_format(self) -> NamingSchema:
        """Renaming with an empty pattern would produce meaningless names."""
        if self.rename_episodes and not self.standard_episode_format.strip():
            raise ValueError("standard_episode_format cannot be empty when rename_episodes is on")
        return self

    model_config = {
        "extra": "forbid",  # Fail on unknown keys (catches typos)
        "populate_by_name": True,  # Allow both alias and field name
    }


def validate_naming_data(data: Mapping[str, Any]) -> NamingSchema:
    """
    Validate naming.yaml data against the schema.

    Args:
        data: Raw dict loaded from naming.yaml

    Returns:
        Validated NamingSchema instance

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return NamingSchema.model_validate(data)
