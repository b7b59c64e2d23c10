"""Render options."""

from pydantic import BaseModel, ConfigDict, Field

_DEFAULT_TRUE_STRING = "X"
_DEFAULT_FALSE_STRING = " "


class RenderOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    true_default: str = Field(
        default=_DEFAULT_TRUE_STRING,
        description="Emitted for a matched tag that has no true-branch",
    )
    false_default: str = Field(
        default=_DEFAULT_FALSE_STRING,
        description="Emitted for an unmatched tag that has no false-branch",
    )
