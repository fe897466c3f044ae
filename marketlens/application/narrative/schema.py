"""
Pydantic schema for the JSON object the narrative model is asked to return.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SourcePayload(BaseModel):
    title: str = "External source"
    uri: str = ""


class NarrativePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(min_length=1)
    sentiment: Literal["Bullish", "Bearish", "Neutral"]
    bullet_points: list[str] = Field(alias="bulletPoints")
    sources: list[SourcePayload] = Field(default_factory=list)
