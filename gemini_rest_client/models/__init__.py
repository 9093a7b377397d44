from .api_models import (
    TextPrompt,
    FileByPathPrompt,
    FileByBase64Prompt,
    FileByUrlPrompt,
    PromptItem,
    TextPart,
    InlinePart,
    ContentPart,
    HistoryMessage,
    GenerationConfigPy,
    ResponseType,
)

__all__ = [
    "TextPrompt",
    "FileByPathPrompt",
    "FileByBase64Prompt",
    "FileByUrlPrompt",
    "PromptItem",
    "TextPart",
    "InlinePart",
    "ContentPart",
    "HistoryMessage",
    "GenerationConfigPy",
    "ResponseType",
]
