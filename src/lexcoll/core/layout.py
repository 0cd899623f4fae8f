# src/lexcoll/core/layout.py
"""
Force-directed layout for the collocation graph.

A small velocity-based simulation run for a fixed number of ticks:

  - link:      springs toward 60 + 140/sqrt(w); heavier collocates sit closer
  - charge:    every pair repels (strength -220)
  - center:    mean position pinned to the canvas midpoint
  - collision: target radius 36, collocates 18

Each tick cools alpha toward zero, applies the forces to velocities, then
damps velocities and moves the nodes. No wall clock and no global random
state: coincident nodes are nudged apart with a fixed-seed LCG, so the same
graph and tick count always give the same positions.
"""

import math
from dataclasses import dataclass

from lexcoll.core.graph import Graph, TARGET


@dataclass(frozen=True)
class LayoutConfig:
    width: float = 800
    height: float = 380
    iterations: int = 180

    # link force: distance = base + spread / sqrt(weight)
    link_base: float = 60.0
    link_spread: float = 140.0
    link_strength: float = 0.5

    charge_strength: float = -220.0
    charge_distance_min: float = 1.0

    target_collision_radius: float = 36.0
    collocate_collision_radius: float = 18.0
    collision_strength: float = 1.0

    alpha: float = 1.0
    alpha_min: float = 0.001
    alpha_target: float = 0.0
    velocity_decay: float = 0.4

    initial_radius: float = 10.0

    @property
    def alpha_decay(self) -> float:
        return 1 - self.alpha_min ** (1 / 300)


@dataclass
class Body:
    """A node while the simulation runs."""
    index: int
    id: str
    group: str
    weight: float | None
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0


@dataclass(frozen=True)
class PlacedNode:
    id: str
    group: str
    weight: float | None
    x: float
    y: float
    radius: float  # collision radius
    r: float       # render radius

    def to_dict(self) -> dict:
        d = {"id": self.id, "group": self.group}
        if self.weight is not None:
            d["weight"] = self.weight
        d.update({"x": self.x, "y": self.y, "radius": self.radius, "r": self.r})
        return d


@dataclass(frozen=True)
class PlacedLink:
    source: str
    target: str
    weight: float
    width: float

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "width": self.width,
        }


@dataclass(frozen=True)
class LaidOutGraph:
    nodes: tuple[PlacedNode, ...] = ()
    links: tuple[PlacedLink, ...] = ()
    width: float = 800
    height: float = 380

    def node(self, node_id: str) -> PlacedNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [l.to_dict() for l in self.links],
        }


# === Render sizes ===

def node_radius(group: str, weight: float | None = None) -> float:
    """Drawn circle radius. Grows with log(weight), capped."""
    if group == TARGET:
        return 14.0
    return 8.0 + min(10.0, math.log((weight or 1) + 1))


def link_width(weight: float | None) -> float:
    return max(1.0, math.log((weight or 1) + 1))


def collision_radius(group: str, config: LayoutConfig) -> float:
    if group == TARGET:
        return config.target_collision_radius
    return config.collocate_collision_radius


def link_distance(weight: float | None, config: LayoutConfig) -> float:
    w = weight or 1
    if w <= 0:
        w = 1
    return config.link_base + config.link_spread / math.sqrt(w)


# === Simulation ===

class Jiggle:
    """Tiny deterministic offsets for nodes sitting exactly on top of each other."""

    A = 1664525
    C = 1013904223
    M = 4294967296

    def __init__(self, seed: int = 1):
        self.state = seed

    def random(self) -> float:
        self.state = (self.A * self.state + self.C) % self.M
        return self.state / self.M

    def __call__(self) -> float:
        return (self.random() - 0.5) * 1e-6


@dataclass
class _Spring:
    source: Body
    target: Body
    weight: float
    distance: float
    strength: float
    bias: float


class ForceSimulation:
    """
    Fixed-step simulation over a Graph.

    Links whose endpoints are not node ids are ignored. When two nodes share
    an id the first one (the target, for built graphs) claims it.
    """

    def __init__(self, graph: Graph, config: LayoutConfig | None = None):
        self.config = config or LayoutConfig()
        self.graph = graph
        self.alpha = self.config.alpha
        self.jiggle = Jiggle()

        self.bodies = [
            Body(index=i, id=n.id, group=n.group, weight=n.weight)
            for i, n in enumerate(graph.nodes)
        ]
        self._place_initial()

        self.radii = [collision_radius(b.group, self.config) for b in self.bodies]
        self.springs = self._build_springs()

    def _place_initial(self) -> None:
        """Phyllotaxis spiral around the origin."""
        angle_step = math.pi * (3 - math.sqrt(5))
        for i, b in enumerate(self.bodies):
            radius = self.config.initial_radius * math.sqrt(0.5 + i)
            angle = i * angle_step
            b.x = radius * math.cos(angle)
            b.y = radius * math.sin(angle)

    def _build_springs(self) -> list[_Spring]:
        by_id: dict[str, Body] = {}
        for b in self.bodies:
            by_id.setdefault(b.id, b)

        resolved = []
        for link in self.graph.links:
            source, target = by_id.get(link.source), by_id.get(link.target)
            if source is None or target is None:
                continue
            resolved.append((source, target, link.weight))

        degree = [0] * len(self.bodies)
        for source, target, _ in resolved:
            degree[source.index] += 1
            degree[target.index] += 1

        springs = []
        for source, target, weight in resolved:
            bias = degree[source.index] / (degree[source.index] + degree[target.index])
            springs.append(_Spring(
                source=source,
                target=target,
                weight=weight,
                distance=link_distance(weight, self.config),
                strength=self.config.link_strength,
                bias=bias,
            ))
        return springs

    # --- forces ---

    def _apply_links(self, alpha: float) -> None:
        for s in self.springs:
            x = s.target.x + s.target.vx - s.source.x - s.source.vx or self.jiggle()
            y = s.target.y + s.target.vy - s.source.y - s.source.vy or self.jiggle()
            length = math.sqrt(x * x + y * y)
            k = (length - s.distance) / length * alpha * s.strength
            x *= k
            y *= k
            s.target.vx -= x * s.bias
            s.target.vy -= y * s.bias
            s.source.vx += x * (1 - s.bias)
            s.source.vy += y * (1 - s.bias)

    def _apply_charge(self, alpha: float) -> None:
        strength = self.config.charge_strength
        dmin2 = self.config.charge_distance_min ** 2
        for node in self.bodies:
            for other in self.bodies:
                if other is node:
                    continue
                x = other.x - node.x
                y = other.y - node.y
                l2 = x * x + y * y
                if x == 0:
                    x = self.jiggle()
                    l2 += x * x
                if y == 0:
                    y = self.jiggle()
                    l2 += y * y
                if l2 < dmin2:
                    l2 = math.sqrt(dmin2 * l2)
                w = strength * alpha / l2
                node.vx += x * w
                node.vy += y * w

    def _apply_center(self) -> None:
        n = len(self.bodies)
        if not n:
            return
        sx = sum(b.x for b in self.bodies) / n - self.config.width / 2
        sy = sum(b.y for b in self.bodies) / n - self.config.height / 2
        for b in self.bodies:
            b.x -= sx
            b.y -= sy

    def _apply_collision(self) -> None:
        strength = self.config.collision_strength
        for i, node in enumerate(self.bodies):
            ri = self.radii[i]
            ri2 = ri * ri
            xi = node.x + node.vx
            yi = node.y + node.vy
            for j in range(i + 1, len(self.bodies)):
                other = self.bodies[j]
                rj = self.radii[j]
                r = ri + rj
                x = xi - (other.x + other.vx)
                y = yi - (other.y + other.vy)
                l2 = x * x + y * y
                if l2 >= r * r:
                    continue
                if x == 0:
                    x = self.jiggle()
                    l2 += x * x
                if y == 0:
                    y = self.jiggle()
                    l2 += y * y
                length = math.sqrt(l2)
                k = (r - length) / length * strength
                x *= k
                y *= k
                share = rj * rj / (ri2 + rj * rj)
                node.vx += x * share
                node.vy += y * share
                other.vx -= x * (1 - share)
                other.vy -= y * (1 - share)

    def tick(self) -> None:
        cfg = self.config
        self.alpha += (cfg.alpha_target - self.alpha) * cfg.alpha_decay

        self._apply_links(self.alpha)
        self._apply_charge(self.alpha)
        self._apply_center()
        self._apply_collision()

        keep = 1 - cfg.velocity_decay
        for b in self.bodies:
            b.vx *= keep
            b.vy *= keep
            b.x += b.vx
            b.y += b.vy

    def run(self, iterations: int | None = None) -> None:
        steps = self.config.iterations if iterations is None else iterations
        for _ in range(steps):
            self.tick()

    def result(self) -> LaidOutGraph:
        nodes = tuple(
            PlacedNode(
                id=b.id,
                group=b.group,
                weight=b.weight,
                x=b.x,
                y=b.y,
                radius=self.radii[b.index],
                r=node_radius(b.group, b.weight),
            )
            for b in self.bodies
        )
        links = tuple(
            PlacedLink(
                source=s.source.id,
                target=s.target.id,
                weight=s.weight,
                width=link_width(s.weight),
            )
            for s in self.springs
        )
        return LaidOutGraph(
            nodes=nodes, links=links, width=self.config.width, height=self.config.height,
        )


def layout(
    graph: Graph,
    width: float = 800,
    height: float = 380,
    iterations: int = 180,
    config: LayoutConfig | None = None,
) -> LaidOutGraph:
    """
    Lay out `graph` on a width x height canvas.

    Pure: builds a fresh simulation, runs exactly `iterations` ticks and
    returns positioned copies of the nodes. The input graph is not touched.
    """
    if config is None:
        config = LayoutConfig(width=width, height=height, iterations=iterations)
    sim = ForceSimulation(graph, config)
    sim.run()
    return sim.result()
