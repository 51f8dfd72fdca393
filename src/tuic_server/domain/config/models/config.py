"""
Server configuration domain model.

This module defines the Config value produced by a successful parse of the
command line.
"""

from pydantic import BaseModel, ConfigDict, Field

PORT_MAX = 0xFFFF
TOKEN_MAX = 0xFFFF_FFFF_FFFF_FFFF


class Config(BaseModel):
    """
    Validated startup configuration.

    Immutable once built; both fields are range-checked so a Config can only
    exist in a valid state.
    """

    model_config = ConfigDict(frozen=True)

    port: int = Field(..., description="Listening port", ge=0, le=PORT_MAX)
    token: int = Field(
        ...,
        description="64-bit SeaHash of the authentication secret",
        ge=0,
        le=TOKEN_MAX,
    )
