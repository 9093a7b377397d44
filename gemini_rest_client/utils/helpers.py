import orjson
from typing import Any, Iterable, Optional

from ..core.config import THINKING_MODEL_IDS


def orjson_dumps_bytes_wrapper(data: Any) -> bytes:
    return orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS)


def mask_api_key(api_key: Optional[str]) -> str:
    """Describe an API key for logging without revealing any of its characters."""
    if not api_key:
        return "(empty)"
    return f"(set, len={len(api_key)})"


def strip_query_string(url: str) -> str:
    """Drop everything from the first '?' so credentials in the query never reach the logs."""
    return url.split("?", 1)[0]


def is_thinking_model(model_id: str, thinking_model_ids: Optional[Iterable[str]] = None) -> bool:
    candidates = THINKING_MODEL_IDS if thinking_model_ids is None else thinking_model_ids
    return model_id in candidates
