from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional, Union, Annotated

# --- Prompt items (caller input) ---

class BasePromptItem(BaseModel):
    type: str
    model_config = ConfigDict(populate_by_name=True, frozen=True)

class TextPrompt(BasePromptItem):
    type: Literal["text"] = "text"
    text: str

class FileByPathPrompt(BasePromptItem):
    type: Literal["file_path"] = "file_path"
    path: str

class FileByBase64Prompt(BasePromptItem):
    type: Literal["file_base64"] = "file_base64"
    data: str  # raw base64 or a data URL
    mime_type: Optional[str] = Field(None, alias="mimeType")

class FileByUrlPrompt(BasePromptItem):
    type: Literal["file_url"] = "file_url"
    url: str

PromptItem = Annotated[
    Union[
        TextPrompt,
        FileByPathPrompt,
        FileByBase64Prompt,
        FileByUrlPrompt,
    ],
    Field(discriminator="type")
]

# --- Normalized parts ---

class BaseContentPart(BaseModel):
    type: str
    model_config = ConfigDict(populate_by_name=True, frozen=True)

class TextPart(BaseContentPart):
    type: Literal["text_content"] = "text_content"
    text: str

    def to_rest(self) -> Dict[str, Any]:
        return {"text": self.text}

class InlinePart(BaseContentPart):
    type: Literal["inline_data_content"] = "inline_data_content"
    base64_data: str = Field(alias="base64Data")
    mime_type: str = Field(alias="mimeType")

    def to_rest(self) -> Dict[str, Any]:
        return {"inlineData": {"mimeType": self.mime_type, "data": self.base64_data}}

ContentPart = Annotated[
    Union[TextPart, InlinePart],
    Field(discriminator="type")
]

# --- History ---

class HistoryMessage(BaseModel):
    role: Literal["user", "model"]
    # None when the model reply carried no text
    content: Optional[ContentPart] = None
    model_config = ConfigDict(frozen=True)

# --- Generation config ---

class GenerationConfigPy(BaseModel):
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(None, alias="topP", ge=0.0, le=1.0)
    response_mime_type: Optional[str] = Field(None, alias="responseMimeType")
    thinking_budget: Optional[int] = Field(None, alias="thinkingBudget", ge=0, le=24576)
    model_config = ConfigDict(populate_by_name=True)

# --- Response shape ---

class ResponseType(str, Enum):
    TEXT = "text"
    OBJECT = "object"
    STRUCTURED = "object"
