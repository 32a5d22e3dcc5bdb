from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, List, Literal


class SeparatedFiles(BaseModel):
    """A document split into its skeleton and the artifacts lifted out of it"""

    skeleton: str = ""
    styles: List[str] = Field(default_factory=list)
    scripts: List[str] = Field(default_factory=list)
    components: Dict[str, str] = Field(default_factory=dict)


class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str = ""
    html: Optional[str] = None
    previous_prompt: Optional[str] = Field(default=None, alias="previousPrompt")


class ChatRequest(BaseModel):
    prompt: str = ""
    context: Optional[str] = None


class ExportRequest(BaseModel):
    html: str


class ErrorEnvelope(BaseModel):
    ok: bool = False
    message: str


class ImageApiKey(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(default="", alias="apiKey")
    enabled: bool = False


class ImageApiKeys(BaseModel):
    unsplash: ImageApiKey = Field(default_factory=ImageApiKey)
    pixabay: ImageApiKey = Field(default_factory=ImageApiKey)
    pexels: ImageApiKey = Field(default_factory=ImageApiKey)


class StreamOutcome(BaseModel):
    status: Literal["completed", "error", "cancelled"]
    document: str = ""
    message: Optional[str] = None
    early_terminated: bool = False
