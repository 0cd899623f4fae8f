# src/lexcoll/core/session.py
"""
Explorer - one user's lookup session.

Holds the searched word, the loaded entry, the selected senses and the state
of the single outstanding generation request:

    IDLE -> PENDING -> SUCCEEDED | FAILED
              |
              +-- abort() --> IDLE   (late response is dropped)

Everything the user sees is derived: `view` projects the entry through the
current selection, `graph()` and `layout()` build from that view.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Iterable

from lexcoll.core.dataset import Dataset, normalize_query
from lexcoll.core.graph import Graph, VIEW_TOP_N
from lexcoll.core.layout import LaidOutGraph, layout
from lexcoll.core.models import WordEntry
from lexcoll.core.normalize import normalize_entry
from lexcoll.core.view import SenseView, project


logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[dict]]


class RequestState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Explorer:
    def __init__(self, dataset: Dataset):
        self.dataset = dataset
        self.searched_word = ""
        self.entry: WordEntry | None = None
        self.selected: list[str] = []
        self.not_found = False
        self.ai_generated = False
        self.request_state = RequestState.IDLE
        self.error: str | None = None
        self._pending: asyncio.Future | None = None

    # === Loading ===

    def _load(self, entry: WordEntry | None, ai_generated: bool = False) -> None:
        self.entry = entry
        self.selected = list(entry.sense_ids) if entry else []
        self.ai_generated = ai_generated and entry is not None

    def search(self, raw_word: str) -> bool:
        """Look the word up in the local dataset. Returns True on a hit."""
        word = normalize_query(raw_word)
        if not word:
            return False

        self.abort()
        self.searched_word = word
        self.ai_generated = False

        entry = self.dataset.find(word)
        self.not_found = entry is None
        self._load(entry)
        if entry is None:
            logger.info("%r not in dataset", word)
        return entry is not None

    async def generate(self, fetch: Fetch, word: str | None = None) -> bool:
        """
        Ask `fetch` for an AI-generated entry and load it.

        Only one request is in flight: starting a new one aborts the previous
        request, whose result is then discarded.
        """
        word = normalize_query(word if word is not None else self.searched_word)
        if not word:
            return False

        self.abort()
        self.searched_word = word
        self.not_found = False
        self.ai_generated = False
        self.error = None
        self.request_state = RequestState.PENDING

        task = asyncio.ensure_future(fetch(word))
        self._pending = task
        try:
            raw = await task
        except asyncio.CancelledError:
            if self._pending is not task:
                return False
            # our own caller was cancelled
            self._pending = None
            self.request_state = RequestState.IDLE
            raise
        except Exception as e:
            if self._pending is not task:
                return False
            self._pending = None
            logger.warning("generation failed for %r: %s", word, e)
            self.request_state = RequestState.FAILED
            self.error = str(e)
            self.not_found = True
            self.ai_generated = False
            return False

        if self._pending is not task:
            return False
        self._pending = None
        self._load(normalize_entry(raw, word=word), ai_generated=True)
        self.request_state = RequestState.SUCCEEDED
        return True

    def abort(self) -> None:
        """Drop the outstanding request, if any."""
        task, self._pending = self._pending, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        self.request_state = RequestState.IDLE

    @property
    def is_loading(self) -> bool:
        return self.request_state is RequestState.PENDING

    # === Selection ===

    def select(self, sense_ids: Iterable[str]) -> None:
        known = self.entry.sense_ids if self.entry else []
        wanted = set(sense_ids)
        self.selected = [sid for sid in known if sid in wanted]

    def toggle_sense(self, sense_id: str) -> None:
        if sense_id in self.selected:
            self.selected = [sid for sid in self.selected if sid != sense_id]
        else:
            self.select([*self.selected, sense_id])

    # === Derived ===

    @property
    def view(self) -> SenseView:
        if self.entry is None:
            return SenseView(word=self.searched_word)
        return project(self.entry, self.selected)

    def graph(self, top_n: int = VIEW_TOP_N) -> Graph:
        return self.view.graph(top_n=top_n)

    def layout(
        self,
        top_n: int = VIEW_TOP_N,
        width: float = 800,
        height: float = 380,
        iterations: int = 180,
    ) -> LaidOutGraph:
        return layout(self.graph(top_n), width=width, height=height, iterations=iterations)
