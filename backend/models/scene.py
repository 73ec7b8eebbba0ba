"""
Scene Models
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from backend.core.exceptions import ValidationError


class _RequestModel(BaseModel):
    """Request body with a single human-readable failure message."""
    model_config = ConfigDict(populate_by_name=True)

    REQUIRED_MESSAGE: ClassVar[str] = "Invalid request."

    @classmethod
    def from_body(cls, body: Any):
        """Validate a decoded JSON body, raising ValidationError on failure."""
        if not isinstance(body, dict):
            raise ValidationError(cls.REQUIRED_MESSAGE, {"body": "expected a JSON object"})
        try:
            return cls.model_validate(body)
        except PydanticValidationError as e:
            errors = [
                {"loc": list(err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ]
            raise ValidationError(cls.REQUIRED_MESSAGE, {"errors": errors})


class GenerateRequest(_RequestModel):
    """POST /api/generate body."""

    REQUIRED_MESSAGE: ClassVar[str] = "Transcript is required."

    transcript: str
    character_description: Optional[str] = Field(default=None, alias="characterDescription")

    @field_validator("transcript")
    @classmethod
    def _transcript_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("transcript is empty")
        return value


class ExpandRequest(_RequestModel):
    """POST /api/expand body.

    Existing scenes are whatever a previous generate returned, so they are
    kept as plain objects and passed to the prompt unchanged.
    """

    REQUIRED_MESSAGE: ClassVar[str] = "existingScenes and scenesToAdd are required."

    existing_scenes: List[Dict[str, Any]] = Field(alias="existingScenes")
    scenes_to_add: int = Field(alias="scenesToAdd")


class ErrorResponse(BaseModel):
    """Error body returned with 400/500 responses."""
    error: str
