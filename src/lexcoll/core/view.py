# src/lexcoll/core/view.py
"""
Sense-filtered view of a word entry.

view = project(entry, selected sense ids). Nothing is cached and the entry is
never modified; callers recompute whenever the selection changes.
"""

from dataclasses import dataclass, field
from typing import Iterable

from lexcoll.core.graph import Graph, VIEW_TOP_N, build_graph
from lexcoll.core.models import Collocation, Example, WordEntry


@dataclass(frozen=True)
class SenseView:
    word: str
    profiles: dict[str, list[Collocation]] = field(default_factory=dict)
    examples: list[Example] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.profiles and not self.examples

    def graph(self, top_n: int = VIEW_TOP_N) -> Graph:
        return build_graph(self.profiles, self.word, top_n=top_n)


def project(entry: WordEntry, selected: Iterable[str]) -> SenseView:
    """Keep only the profiles and examples of the selected senses."""
    chosen = set(selected)
    profiles = {
        sense_id: collocations
        for sense_id, collocations in entry.collocation_map().items()
        if sense_id in chosen
    }
    examples = [e for e in entry.examples if e.sense_id in chosen]
    return SenseView(word=entry.word, profiles=profiles, examples=examples)


def resolve_labels(entry: WordEntry, labels: Iterable[str]) -> list[str]:
    """
    Sense ids whose label is in `labels`.

    Two senses sharing a label are both returned; the view itself is keyed by
    id so they stay separate.
    """
    wanted = set(labels)
    return [sid for sid in entry.sense_ids if entry.label_for(sid) in wanted]
