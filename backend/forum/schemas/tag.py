"""Tag Schemas — request and response DTOs for tags."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagRequest(BaseModel):
    """Tag creation — names are trimmed and lower-cased."""
    name: str = Field(min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
