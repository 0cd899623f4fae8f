# src/lexcoll/core/dataset.py
"""
Local word dataset.

A JSON file {"words": [entry, ...]} where every entry has the same
senses/profiles/examples shape the AI endpoint returns. Entries go through
the normalizer on load, so the rest of the code never sees raw records.
"""

import json
import logging
from pathlib import Path

from lexcoll.core.models import WordEntry
from lexcoll.core.normalize import normalize_entry


logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "collocations.json"


def normalize_query(word: str) -> str:
    return word.strip().lower()


class Dataset:
    def __init__(self, entries: list[WordEntry] | None = None):
        self.entries: dict[str, WordEntry] = {}
        for entry in entries or []:
            key = normalize_query(entry.word)
            if key and key not in self.entries:
                self.entries[key] = entry

    @classmethod
    def from_dict(cls, data: dict) -> "Dataset":
        words = data.get("words") if isinstance(data, dict) else None
        if not isinstance(words, list):
            words = []
        return cls([normalize_entry(w) for w in words if isinstance(w, dict)])

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Dataset":
        """Load from `path` (default: the bundled file). Missing file -> empty."""
        path = Path(path) if path else DEFAULT_PATH
        if not path.exists():
            logger.warning("dataset not found: %s", path)
            return cls()

        data = json.loads(path.read_text(encoding="utf-8"))
        dataset = cls.from_dict(data)
        logger.info("loaded %d words from %s", len(dataset), path)
        return dataset

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: str) -> bool:
        return normalize_query(word) in self.entries

    def find(self, word: str) -> WordEntry | None:
        return self.entries.get(normalize_query(word))

    def words(self) -> list[str]:
        return sorted(self.entries)
