"""Data models for prompt scene extraction."""

import uuid
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_scene_id() -> str:
    """Generate a session-unique scene identifier."""
    return uuid.uuid4().hex


class SceneRecord(BaseModel):
    """One video/image prompt extracted from AI assistant output."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_scene_id)
    scene_number: str  # "3", "12", not guaranteed numeric or unique
    description: str  # Cleaned prompt body, the text sent downstream
    short_label: str  # Display-only summary
    source: str  # File name or "Pasted Content"

    @field_validator('description')
    @classmethod
    def validate_description_not_empty(cls, v: str) -> str:
        """Ensure description is not empty."""
        if not v or not v.strip():
            raise ValueError("Scene description cannot be empty")
        return v


@dataclass
class SceneCandidate:
    """A heuristic chunk that survived filtering, before the merge pass.

    Attributes:
        scene_number: Number from the header marker or the sequential fallback
        description: Cleaned chunk text
        short_label: Truncated description
        explicit_number: True when scene_number came from a header marker
        title_stub: True when the chunk is too short to stand alone and only
            survives by merging into the following chunk
    """
    scene_number: str
    description: str
    short_label: str
    explicit_number: bool = False
    title_stub: bool = False

    def to_record(self, source: str) -> SceneRecord:
        return SceneRecord(
            scene_number=self.scene_number,
            description=self.description,
            short_label=self.short_label,
            source=source,
        )
