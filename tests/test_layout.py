# tests/test_layout.py
"""Tests for the force-directed layout."""

import math

import pytest

from lexcoll.core.graph import Graph, Link, Node, build_graph
from lexcoll.core.layout import (
    ForceSimulation, LayoutConfig, Jiggle,
    layout, link_distance, link_width, node_radius,
)
from lexcoll.core.models import Collocation


def star(weights: dict[str, int], word: str = "w") -> Graph:
    profiles = {"s1": [Collocation(token=t, frequency=f) for t, f in weights.items()]}
    return build_graph(profiles, word)


def dist(a, b) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def test_deterministic():
    graph = star({"a": 300, "b": 120, "c": 40, "d": 40, "e": 7})
    first = layout(graph)
    second = layout(graph)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_positions_are_finite():
    graph = star({f"t{i}": 5 + i * 13 for i in range(20)})
    for n in layout(graph).nodes:
        assert math.isfinite(n.x) and math.isfinite(n.y)


def test_keeps_node_order_and_attributes():
    graph = star({"a": 30, "b": 10})
    laid_out = layout(graph)
    assert [(n.id, n.group, n.weight) for n in laid_out.nodes] == [
        ("w", "target", None), ("a", "collocation", 30), ("b", "collocation", 10),
    ]
    assert [(l.source, l.target, l.weight) for l in laid_out.links] == [("w", "a", 30), ("w", "b", 10)]


def test_target_collision_radius_dominates():
    laid_out = layout(star({"a": 800, "b": 5}))
    target = laid_out.node("w")
    assert all(target.radius >= n.radius for n in laid_out.nodes)
    assert target.radius == 36
    assert laid_out.node("a").radius == 18


def test_heavier_collocates_sit_closer():
    laid_out = layout(star({"heavy": 400, "mid": 100, "light": 4}))
    target = laid_out.node("w")
    assert dist(target, laid_out.node("heavy")) < dist(target, laid_out.node("light"))


def test_layout_centered_on_canvas():
    laid_out = layout(star({f"t{i}": 10 + i for i in range(10)}), width=600, height=400)
    cx = sum(n.x for n in laid_out.nodes) / len(laid_out.nodes)
    cy = sum(n.y for n in laid_out.nodes) / len(laid_out.nodes)
    assert cx == pytest.approx(300, abs=20)
    assert cy == pytest.approx(200, abs=20)


def test_collocates_do_not_pile_up():
    laid_out = layout(star({f"t{i}": 50 for i in range(8)}))
    collocates = [n for n in laid_out.nodes if n.group == "collocation"]
    for i, a in enumerate(collocates):
        for b in collocates[i + 1:]:
            assert dist(a, b) > 10


def test_single_node_lands_on_center():
    laid_out = layout(build_graph({}, "run"), width=800, height=380)
    (node,) = laid_out.nodes
    assert (node.x, node.y) == (pytest.approx(400), pytest.approx(190))
    assert laid_out.links == ()


def test_zero_iterations_returns_initial_spiral():
    laid_out = layout(star({"a": 1}), iterations=0)
    first = laid_out.nodes[0]
    assert first.x == pytest.approx(10 * math.sqrt(0.5))
    assert first.y == pytest.approx(0)


def test_iteration_count_matters():
    graph = star({"a": 10, "b": 20})
    assert layout(graph, iterations=5) != layout(graph, iterations=180)


def test_dangling_links_are_skipped():
    graph = Graph(
        nodes=(Node("w", "target"), Node("a", "collocation", 3)),
        links=(Link("w", "a", 3), Link("w", "ghost", 9)),
    )
    laid_out = layout(graph)
    assert [l.target for l in laid_out.links] == ["a"]


def test_duplicate_id_resolves_to_first_node():
    graph = Graph(
        nodes=(Node("w", "target"), Node("w", "collocation", 5)),
        links=(Link("w", "w", 5),),
    )
    sim = ForceSimulation(graph)
    assert sim.springs[0].source is sim.bodies[0]
    assert sim.springs[0].target is sim.bodies[0]
    sim.run(10)
    assert all(math.isfinite(b.x) for b in sim.bodies)


def test_custom_config():
    config = LayoutConfig(width=200, height=100, iterations=50, target_collision_radius=50)
    laid_out = layout(star({"a": 5}), config=config)
    assert (laid_out.width, laid_out.height) == (200, 100)
    assert laid_out.node("w").radius == 50


# === Helpers ===

def test_link_distance_decreases_with_weight():
    config = LayoutConfig()
    assert link_distance(1, config) == pytest.approx(200)
    assert link_distance(4, config) == pytest.approx(130)
    assert link_distance(None, config) == pytest.approx(200)
    assert link_distance(0, config) == pytest.approx(200)


def test_render_radius():
    assert node_radius("target") == 14
    assert node_radius("collocation", 1) == pytest.approx(8 + math.log(2))
    assert node_radius("collocation", 10**9) == 18
    assert node_radius("collocation", 10) < node_radius("collocation", 100)


def test_link_width():
    assert link_width(1) == 1
    assert link_width(100) == pytest.approx(math.log(101))


def test_jiggle_is_seeded():
    a, b = Jiggle(), Jiggle()
    assert [a() for _ in range(5)] == [b() for _ in range(5)]
    assert all(abs(v) < 1e-6 for v in (Jiggle()() for _ in range(5)))
