# src/lexcoll/core/normalize.py
"""
Normalize raw collocation records from the dataset or the AI endpoint.

Nothing here raises on bad data. Each field degrades on its own:

    {"token": "RUN FAST", "freq": "12.9", "pmi": None, "position": "BEFORE"}
      -> Collocation(token="run fast", frequency=12, pmi=0.0, position="left")
"""

import math

from lexcoll.core.models import (
    Collocation, CollocationProfile, Example, Sense, WordEntry, POSITIONS,
)


POSITION_ALIASES = {"before": "left", "after": "right"}


def _as_number(value) -> float | None:
    if value is None or isinstance(value, (list, dict)):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


def normalize_token(value) -> str:
    return _text(value).lower()


def normalize_position(value) -> str:
    pos = _text(value).strip().lower()
    pos = POSITION_ALIASES.get(pos, pos)
    return pos if pos in POSITIONS else "right"


def normalize_frequency(value) -> int:
    number = _as_number(value)
    if number is None:
        return 1
    return max(1, math.floor(number))


def normalize_pmi(value) -> float:
    number = _as_number(value)
    if number is None:
        return 0.0
    return max(0.0, number)


def normalize_collocation(raw) -> Collocation:
    """Build a Collocation from any record shape. Accepts `freq` or `frequency`."""
    if isinstance(raw, Collocation):
        raw = raw.to_dict()
    if not isinstance(raw, dict):
        raw = {}

    freq = raw.get("freq")
    if freq is None:
        freq = raw.get("frequency")
    token = raw.get("token")
    if token is None:
        token = raw.get("word")

    return Collocation(
        token=normalize_token(token),
        frequency=normalize_frequency(freq),
        pmi=normalize_pmi(raw.get("pmi")),
        position=normalize_position(raw.get("position")),
    )


def is_low_quality(collocation: Collocation) -> bool:
    """Empty tokens survive normalization but should not be trusted."""
    return not collocation.token.strip()


def _items(value) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def normalize_sense(raw: dict) -> Sense:
    sense_id = _text(raw.get("id"))
    label = _text(raw.get("label")) or sense_id
    return Sense(id=sense_id, label=label, gloss=_text(raw.get("gloss")))


def normalize_profile(raw: dict) -> CollocationProfile:
    collocs = raw.get("top_collocations")
    if not isinstance(collocs, list):
        collocs = []
    return CollocationProfile(
        sense_id=_text(raw.get("sense_id")),
        collocations=tuple(normalize_collocation(c) for c in collocs),
    )


def normalize_example(raw: dict) -> Example:
    return Example(
        sentence=_text(raw.get("sentence")),
        sense_id=_text(raw.get("sense_id")),
    )


def normalize_entry(raw, word: str | None = None) -> WordEntry:
    """
    Degrade a whole dataset/AI object into a WordEntry.

    Non-list sections become empty and non-dict items are skipped.
    `word` overrides whatever the record claims to be about.
    """
    if not isinstance(raw, dict):
        raw = {}
    return WordEntry(
        word=word if word is not None else _text(raw.get("word")),
        senses=tuple(normalize_sense(s) for s in _items(raw.get("senses"))),
        profiles=tuple(normalize_profile(p) for p in _items(raw.get("profiles"))),
        examples=tuple(normalize_example(e) for e in _items(raw.get("examples"))),
    )
