# src/lexcoll/core/graph.py
"""
Collocation graph: the target word in the middle, its strongest collocates
around it.

Star topology only. Every link runs from the target to one collocate with
weight = that collocate's frequency summed across the included senses.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping

from lexcoll.core.models import Collocation


API_TOP_N = 20
VIEW_TOP_N = 16

TARGET = "target"
COLLOCATION = "collocation"


@dataclass(frozen=True)
class Node:
    id: str
    group: str
    weight: int | None = None

    def to_dict(self) -> dict:
        d = {"id": self.id, "group": self.group}
        if self.weight is not None:
            d["weight"] = self.weight
        return d


@dataclass(frozen=True)
class Link:
    source: str
    target: str
    weight: float

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}


@dataclass(frozen=True)
class Graph:
    nodes: tuple[Node, ...] = ()
    links: tuple[Link, ...] = ()

    @property
    def target(self) -> Node | None:
        for n in self.nodes:
            if n.group == TARGET:
                return n
        return None

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [l.to_dict() for l in self.links],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        nodes = tuple(
            Node(id=str(n["id"]), group=n.get("group", COLLOCATION), weight=n.get("weight"))
            for n in data["nodes"]
        )
        links = tuple(
            Link(source=str(l["source"]), target=str(l["target"]), weight=l.get("weight", 1))
            for l in data["links"]
        )
        return cls(nodes=nodes, links=links)


def is_well_formed(raw, word: str | None = None, max_links: int = API_TOP_N) -> bool:
    """
    True if `raw` is a star graph we can pass through untouched: one target
    node (named `word` when given), at most `max_links` links, each running
    from the target to some other node.
    """
    if not isinstance(raw, dict):
        return False
    nodes, links = raw.get("nodes"), raw.get("links")
    if not isinstance(nodes, list) or not isinstance(links, list):
        return False
    if len(links) > max_links:
        return False
    for n in nodes:
        if not isinstance(n, dict) or not isinstance(n.get("id"), str):
            return False
        if n.get("group", COLLOCATION) not in (TARGET, COLLOCATION):
            return False
    targets = [n["id"] for n in nodes if n.get("group") == TARGET]
    if len(targets) != 1:
        return False
    hub = targets[0]
    if word is not None and hub != word:
        return False
    for l in links:
        if not isinstance(l, dict):
            return False
        if not isinstance(l.get("source"), str) or not isinstance(l.get("target"), str):
            return False
        if l["source"] != hub or l["target"] == hub:
            return False
        weight = l.get("weight", 1)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            return False
    return True


def aggregate(profiles: Iterable[Iterable[Collocation]]) -> dict[str, int]:
    """token -> summed frequency. Dict order is first-seen order."""
    totals: dict[str, int] = {}
    for collocations in profiles:
        for c in collocations:
            totals[c.token] = totals.get(c.token, 0) + c.frequency
    return totals


def rank(totals: Mapping[str, int], top_n: int) -> list[tuple[str, int]]:
    """
    Strongest collocates first.

    sorted() is stable, so equal sums keep first-seen order.
    """
    if top_n <= 0:
        return []
    ordered = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)
    return ordered[:top_n]


def build_graph(
    profiles: Mapping[str, Iterable[Collocation]] | Iterable[Iterable[Collocation]],
    word: str,
    top_n: int = API_TOP_N,
) -> Graph:
    """
    Build the star graph for `word` from per-sense collocation lists.

    `profiles` is a sense-keyed mapping or any iterable of collocation lists.
    Empty input gives a graph holding only the target node. Empty tokens and
    tokens equal to `word` are left out.
    """
    if isinstance(profiles, Mapping):
        profiles = profiles.values()

    totals = aggregate(profiles)
    # no blank nodes, and no second node named after the target
    totals.pop("", None)
    totals.pop(word, None)
    top = rank(totals, top_n)

    nodes = [Node(id=word, group=TARGET)]
    links = []
    for token, weight in top:
        nodes.append(Node(id=token, group=COLLOCATION, weight=weight))
        links.append(Link(source=word, target=token, weight=weight))

    return Graph(nodes=tuple(nodes), links=tuple(links))
