import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL_FROM_ENV = os.getenv("LOG_LEVEL", "INFO").upper()

GOOGLE_API_BASE_URL = os.getenv("GOOGLE_API_BASE_URL", "https://generativelanguage.googleapis.com")
GEMINI_API_VERSION = os.getenv("GEMINI_API_VERSION", "v1beta")

# Read only as a fallback when no key is passed to the session
GEMINI_API_KEY_ENV = os.getenv("GEMINI_API_KEY")

DEFAULT_MODEL_ID = os.getenv("GEMINI_MODEL_ID", "gemini-1.5-flash")

API_TIMEOUT = float(os.getenv("API_TIMEOUT", "30"))
FILE_FETCH_TIMEOUT = float(os.getenv("FILE_FETCH_TIMEOUT", "30"))

# ===== Generation defaults =====
DEFAULT_TEMPERATURE = 1
DEFAULT_TOP_P = 0.95
DEFAULT_RESPONSE_MIME_TYPE = "text/plain"

# Models that get a thinkingConfig block injected into generationConfig
THINKING_MODEL_IDS = [
    m.strip()
    for m in os.getenv("THINKING_MODEL_IDS", "gemini-2.5-flash-preview-04-17").split(",")
    if m.strip()
]
DEFAULT_THINKING_BUDGET = int(os.getenv("THINKING_BUDGET", "8000"))

# ===== Inline file rules =====
SUPPORTED_INLINE_MIME_PREFIXES = ["image/"]
SUPPORTED_INLINE_MIME_TYPES = ["application/pdf"]

FALLBACK_MIME_TYPE = "application/octet-stream"
