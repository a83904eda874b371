"""Models for image analysis requests."""

import base64

from pydantic import BaseModel, Field


class AnalysisProfile(BaseModel):
    """Prompt text and generation parameters for one analysis behavior."""

    system_prompt: str | None = None
    user_prompt: str
    max_tokens: int = Field(gt=0)
    temperature: float = Field(ge=0.0, le=2.0)


class ImageUpload(BaseModel):
    """Uploaded image held in memory for the duration of a request."""

    content: bytes
    media_type: str

    def to_data_url(self) -> str:
        """Encode the upload as a base64 data URL."""
        encoded = base64.b64encode(self.content).decode("utf-8")
        return f"data:{self.media_type};base64,{encoded}"
