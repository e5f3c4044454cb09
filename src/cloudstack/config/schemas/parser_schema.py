"""Response parser configuration schema."""
from pydantic import BaseModel, Field


class ParserConfig(BaseModel):
    """How strictly response envelopes are checked."""

    strict_envelopes: bool = Field(
        True,
        description="Raise on malformed list envelopes instead of returning no records",
    )
