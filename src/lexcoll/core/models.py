# src/lexcoll/core/models.py
"""
Lexical records for one looked-up word.

A word has senses ("run.s1" motion, "run.s2" manage), each sense owns a
collocation profile, and usage examples point back at a sense.

Wire form (dataset file and AI output) uses the keys `sense_id`,
`top_collocations` and `freq`; the dataclasses use readable names.
"""

from dataclasses import dataclass, field


POSITIONS = ("left", "right")


@dataclass(frozen=True)
class Sense:
    id: str
    label: str
    gloss: str = ""

    @property
    def definition(self) -> str:
        """Label and gloss as shown next to the sense checkbox."""
        if not self.gloss:
            return self.label
        return f"{self.label}: {self.gloss}"

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "gloss": self.gloss}


@dataclass(frozen=True)
class Collocation:
    token: str
    frequency: int = 1
    pmi: float = 0.0
    position: str = "right"

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "freq": self.frequency,
            "pmi": self.pmi,
            "position": self.position,
        }


@dataclass(frozen=True)
class Example:
    sentence: str
    sense_id: str

    def to_dict(self) -> dict:
        return {"sentence": self.sentence, "sense_id": self.sense_id}


@dataclass(frozen=True)
class CollocationProfile:
    """Collocations of one sense, in the order supplied (by freq, descending)."""
    sense_id: str
    collocations: tuple[Collocation, ...] = ()

    def to_dict(self) -> dict:
        return {
            "sense_id": self.sense_id,
            "top_collocations": [c.to_dict() for c in self.collocations],
        }


@dataclass(frozen=True)
class WordEntry:
    word: str
    senses: tuple[Sense, ...] = ()
    profiles: tuple[CollocationProfile, ...] = ()
    examples: tuple[Example, ...] = ()

    @property
    def sense_ids(self) -> list[str]:
        """
        Every sense id the entry knows about, in order.

        Declared senses come first, then ids that only appear on a profile
        (AI output sometimes references senses it never declared).
        """
        ids = [s.id for s in self.senses]
        for p in self.profiles:
            if p.sense_id not in ids:
                ids.append(p.sense_id)
        return ids

    def label_for(self, sense_id: str) -> str:
        for s in self.senses:
            if s.id == sense_id:
                return s.label
        return sense_id

    def collocation_map(self) -> dict[str, list[Collocation]]:
        """sense id -> collocations. A repeated profile replaces the earlier one."""
        return {p.sense_id: list(p.collocations) for p in self.profiles}

    def examples_for(self, sense_id: str) -> list[Example]:
        return [e for e in self.examples if e.sense_id == sense_id]

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "senses": [s.to_dict() for s in self.senses],
            "profiles": [p.to_dict() for p in self.profiles],
            "examples": [e.to_dict() for e in self.examples],
        }
