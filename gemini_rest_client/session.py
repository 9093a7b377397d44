import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import httpx

from .core.config import API_TIMEOUT, DEFAULT_MODEL_ID, FILE_FETCH_TIMEOUT, GEMINI_API_KEY_ENV
from .core.exceptions import InvalidInputError
from .core.http_client import close_http_client, create_http_client
from .models.api_models import GenerationConfigPy, HistoryMessage, ResponseType
from .services.api_gateway import GeminiApiGateway
from .services.history_store import HistoryStore
from .services.prompt_normalizer import PromptNormalizer, RawPrompt
from .services.request_builder import prepare_gemini_rest_api_request
from .services.response_extractor import ResponseExtractor
from .utils.helpers import mask_api_key

logger = logging.getLogger("GeminiRestClient.Session")


class GeminiSession:
    """
    A conversation with one Gemini model over the REST generateContent endpoint.

    Each ``send_prompt`` call is one blocking request/response exchange. When
    ``include_history`` is set, every message recorded so far is replayed
    ahead of the new turn. A session is not safe to share between threads
    without external locking.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_id: str = DEFAULT_MODEL_ID,
        include_history: bool = False,
        *,
        base_url: Optional[str] = None,
        timeout: float = API_TIMEOUT,
        fetch_timeout: float = FILE_FETCH_TIMEOUT,
        generation_config: Optional[GenerationConfigPy] = None,
        thinking_model_ids: Optional[Iterable[str]] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        if api_key:
            api_key = api_key.strip()
        if not api_key:
            api_key = GEMINI_API_KEY_ENV
            if not api_key:
                raise ValueError("A Gemini API key is required: pass api_key or set GEMINI_API_KEY.")
            logger.info("Using API key from GEMINI_API_KEY environment variable")

        self._api_key = api_key
        self._model_id = model_id
        self._include_history = include_history
        self.base_url = base_url
        self.generation_config = generation_config
        self.thinking_model_ids = list(thinking_model_ids) if thinking_model_ids is not None else None

        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else create_http_client(timeout)

        self._history = HistoryStore()
        self._normalizer = PromptNormalizer(self._history, self._http_client, fetch_timeout)
        self._gateway = GeminiApiGateway(self._http_client, timeout)
        self._extractor = ResponseExtractor(self._history)

        self.last_request: Optional[Dict[str, Any]] = None

        logger.info(f"GeminiSession ready: model={model_id}, include_history={include_history}, "
                    f"key={mask_api_key(api_key)}")

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def include_history(self) -> bool:
        return self._include_history

    def send_prompt(
        self,
        prompts: Union[RawPrompt, Sequence[RawPrompt]],
        response_type: Union[ResponseType, str] = ResponseType.TEXT,
    ) -> Any:
        """
        Send one prompt (or a list of prompt items) and return the reply.

        Args:
            prompts: A string, a prompt item model, a legacy prompt dict, or a list of these.
            response_type: ``ResponseType.TEXT`` for the trimmed reply text,
                ``ResponseType.OBJECT`` for the JSON block embedded in the reply.

        Returns:
            The reply text, the decoded JSON value, or a descriptive string when
            no JSON block could be extracted.

        Raises:
            GeminiApiException: Any subclass, depending on where the call failed.
        """
        try:
            response_type = ResponseType(response_type)
        except ValueError as e:
            raise InvalidInputError(f"Invalid input: Unsupported response type: {response_type}") from e

        # Snapshot before this call's user parts are recorded
        replay = self._history.all() if self._include_history else ()

        parts = self._normalizer.normalize(prompts)

        url, headers, payload = prepare_gemini_rest_api_request(
            parts,
            replay,
            self._model_id,
            self._api_key,
            base_url=self.base_url,
            generation_config=self.generation_config,
            thinking_model_ids=self.thinking_model_ids,
        )
        self.last_request = payload

        raw_body = self._gateway.exchange(url, payload, headers)
        return self._extractor.extract(raw_body, response_type)

    def get_history(self) -> List[HistoryMessage]:
        return list(self._history.all())

    def clear_history(self) -> None:
        self._history.clear()

    def close(self) -> None:
        if self._owns_http_client:
            close_http_client(self._http_client)

    def __enter__(self) -> "GeminiSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
