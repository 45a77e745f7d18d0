"""Slide options.

Options are validated with pydantic. Start page indices are exposed
(user-facing) indices; the navigator shifts them into the padded index
space when an axis loops.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from slidepages.core.errors import SlideConfigError

_TRUTHY = {"1", "true", "yes", "on"}


class SlideConfig(BaseModel):
    """Options for a slide behavior."""

    loop: bool = Field(
        False, description="Wrap around on every slide-capable axis"
    )
    start_page_x: int = Field(0, ge=0, description="Exposed column shown first")
    start_page_y: int = Field(0, ge=0, description="Exposed row shown first")

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {"loop": True, "start_page_x": 0, "start_page_y": 0}
        },
    )

    @classmethod
    def from_env(cls) -> "SlideConfig":
        """Build options from SLIDE_LOOP, SLIDE_START_PAGE_X and SLIDE_START_PAGE_Y.

        Raises:
            SlideConfigError: If a variable holds an invalid value.
        """
        values: dict[str, Any] = {
            "loop": os.getenv("SLIDE_LOOP", "false").strip().lower() in _TRUTHY,
        }
        start_x = os.getenv("SLIDE_START_PAGE_X")
        if start_x is not None:
            values["start_page_x"] = start_x
        start_y = os.getenv("SLIDE_START_PAGE_Y")
        if start_y is not None:
            values["start_page_y"] = start_y
        return load_slide_config(**values)


def load_slide_config(**overrides: Any) -> SlideConfig:
    """Validate options, translating pydantic failures into SlideConfigError."""
    try:
        return SlideConfig(**overrides)
    except ValidationError as ex:
        raise SlideConfigError.from_exception(ex) from ex
