import logging
from typing import Iterator, List, Tuple

from ..models.api_models import HistoryMessage

logger = logging.getLogger("GeminiRestClient.Services.HistoryStore")


class HistoryStore:
    """
    Append-only log of the messages exchanged in a session.

    Insertion order is the conversation order replayed on the next request.
    Entries are immutable; the store only grows or is wiped by ``clear()``.
    Not thread-safe: a session is meant to have a single owner.
    """

    def __init__(self):
        self._messages: List[HistoryMessage] = []

    def append(self, message: HistoryMessage) -> None:
        self._messages.append(message)

    def all(self) -> Tuple[HistoryMessage, ...]:
        return tuple(self._messages)

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._messages)} history message(s)")
        self._messages = []

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[HistoryMessage]:
        return iter(self.all())
