"""Graph algorithms over the campus map: connectivity, Euler circuits, paths and trees."""

from __future__ import annotations

import heapq
import math
import random
from collections import deque
from dataclasses import dataclass

from campusnav.graph import Edge, GraphError, LGraph

TEACHING_TYPE = "Teaching_Research_and_Administration"
UNREACHABLE = "不可达"


class DSU:
    """Disjoint-set union with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [1] * n

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        fx, fy = self.find(x), self.find(y)
        if fx == fy:
            return
        if self._rank[fx] > self._rank[fy]:
            self._parent[fy] = fx
        else:
            self._parent[fx] = fy
            if self._rank[fx] == self._rank[fy]:
                self._rank[fy] += 1

    def same(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)


@dataclass(frozen=True)
class ShortestPathResult:
    """Length of a shortest path and the names along it; ``distance`` is None if unreachable."""

    distance: int | None
    path: tuple[str, ...] = ()

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    @property
    def path_string(self) -> str:
        return " ".join(self.path) if self.reachable else UNREACHABLE


@dataclass(frozen=True)
class TopologicalPathResult:
    """Shortest path constrained to a given order; ``distance`` is None if there is none."""

    distance: int | None
    route: tuple[str, ...] = ()

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    @property
    def route_string(self) -> str:
        return " -> ".join(self.route)


@dataclass(frozen=True)
class PlanVisitResult:
    """Visiting order of locations and the total time in minutes."""

    path: tuple[str, ...]
    total_time_minutes: int

    @property
    def path_string(self) -> str:
        return " ".join(self.path)


@dataclass(frozen=True)
class ConnectionEdge:
    """A suggested new road between two locations."""

    source: str
    dest: str
    weight: int


def _id_to_name(graph: LGraph) -> dict[int, str]:
    return {vid: name for name, vid in graph.names().items()}


def _live_ids(graph: LGraph) -> list[int]:
    return sorted(graph.names().values())


def get_circuit(graph: LGraph, start: int) -> list[int]:
    """Walk from ``start`` removing edges until stuck or back at ``start``; mutates ``graph``."""
    circuit = [start]
    head = start
    while adj := graph.adjacency(head):
        tail = adj[0].dest
        graph.delete_edge_by_id(head, tail)
        circuit.append(tail)
        if tail == start:
            break
        head = tail
    return circuit


def has_euler_circuit(graph: LGraph) -> bool:
    """True if the graph is connected and every vertex has even degree."""
    if not is_connected(graph):
        return False
    return all(len(graph.adjacency(v)) % 2 == 0 for v in _live_ids(graph))


def euler_circuit(graph: LGraph) -> list[int]:
    """An Euler circuit as vertex ids, or an empty list if none exists."""
    ids = _live_ids(graph)
    if not ids or not has_euler_circuit(graph):
        return []
    work = graph.copy()
    circuit = get_circuit(work, ids[0])
    i = 0
    while i < len(circuit):
        v = circuit[i]
        while work.adjacency(v):
            sub = get_circuit(work, v)
            circuit[i + 1 : i + 1] = sub[1:]
        i += 1
    return circuit


def bfs(graph: LGraph, start: int) -> list[int]:
    """Vertex ids reachable from ``start`` in breadth-first order."""
    seen = {start}
    order = [start]
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for edge in graph.adjacency(u):
            if edge.dest not in seen:
                seen.add(edge.dest)
                order.append(edge.dest)
                queue.append(edge.dest)
    return order


def is_connected(graph: LGraph) -> bool:
    """True if every vertex is reachable from the first; an empty graph is connected."""
    ids = _live_ids(graph)
    if not ids:
        return True
    return set(bfs(graph, ids[0])) >= set(ids)


def _dijkstra(graph: LGraph, start: int) -> tuple[dict[int, int], dict[int, int]]:
    dist = {start: 0}
    prev: dict[int, int] = {}
    done: set[int] = set()
    heap = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if u in done:
            continue
        done.add(u)
        for edge in graph.adjacency(u):
            v = edge.dest
            if v in done:
                continue
            nd = d + edge.weight
            if nd < dist.get(v, math.inf):
                dist[v] = nd
                prev[v] = u
                heapq.heappush(heap, (nd, v))
    return dist, prev


def shortest_path(graph: LGraph, x_name: str, y_name: str) -> ShortestPathResult:
    """Shortest path between two named locations."""
    index = graph.names()
    if x_name not in index or y_name not in index:
        raise GraphError("输入的顶点名不存在！")
    start, end = index[x_name], index[y_name]
    dist, prev = _dijkstra(graph, start)
    if end not in dist:
        return ShortestPathResult(None)
    names = _id_to_name(graph)
    route = [end]
    while route[-1] != start:
        route.append(prev[route[-1]])
    return ShortestPathResult(dist[end], tuple(names[v] for v in reversed(route)))


def topological_shortest_path(graph: LGraph, path: list[str]) -> TopologicalPathResult:
    """Shortest route from the first to the last name, relaxing edges in the given order."""
    if not path:
        raise ValueError("path must not be empty")
    first, end = path[0], path[-1]
    dist: dict[str, float] = {name: math.inf for name in path}
    dist[first] = 0
    prev: dict[str, str] = {}
    index = graph.names()
    for u_name in path:
        if not graph.exists_vertex(u_name):
            continue
        for edge in graph.adjacency(index[u_name]):
            v_name = graph.vertex_by_id(edge.dest).name
            if v_name in dist:
                nd = dist[u_name] + edge.weight
                if nd < dist[v_name]:
                    dist[v_name] = nd
                    prev[v_name] = u_name
    if dist[end] == math.inf:
        return TopologicalPathResult(None)
    route = [end]
    while route[-1] != first:
        route.append(prev[route[-1]])
    return TopologicalPathResult(int(dist[end]), tuple(reversed(route)))


def minimum_spanning_tree(graph: LGraph) -> list[Edge]:
    """Edges of a minimum spanning tree (forest if disconnected), by Kruskal's method."""
    ids = _live_ids(graph)
    if not ids:
        return []
    n = graph.vertex_count()
    dsu = DSU(ids[-1] + 1)
    tree: list[Edge] = []
    for edge in graph.sorted_edges():
        if len(tree) >= n - 1:
            break
        if not dsu.same(edge.source, edge.dest):
            dsu.unite(edge.source, edge.dest)
            tree.append(edge)
    return tree


def plan_teaching_visit(graph: LGraph, start_gate: str) -> PlanVisitResult:
    """Greedy nearest-next tour of all teaching buildings starting at a gate."""
    index = graph.names()
    if start_gate not in index:
        raise GraphError("起点校门不存在！")
    names = _id_to_name(graph)
    unvisited = sorted(
        v for v in index.values() if graph.vertex_by_id(v).type == TEACHING_TYPE
    )
    current = index[start_gate]
    order = [current]
    total_seconds = 0
    while unvisited:
        best: tuple[int, int] | None = None
        for v in unvisited:
            sp = shortest_path(graph, names[current], names[v])
            if sp.reachable and (best is None or sp.distance < best[0]):
                best = (sp.distance, v)
        if best is None:
            raise GraphError("部分教学楼不可达！")
        distance, nxt = best
        total_seconds += distance + graph.vertex_by_id(nxt).visit_time * 60
        order.append(nxt)
        current = nxt
        unvisited.remove(nxt)
    return PlanVisitResult(
        tuple(names[v] for v in order), (total_seconds + 30) // 60
    )


def connection_suggestions(
    graph: LGraph, rng: random.Random | None = None
) -> list[ConnectionEdge]:
    """Roads that would join consecutive connected components, with random ends and lengths."""
    rng = rng if rng is not None else random.Random()
    components: list[list[int]] = []
    seen: set[int] = set()
    for v in _live_ids(graph):
        if v not in seen:
            comp = bfs(graph, v)
            seen.update(comp)
            components.append(comp)
    if len(components) <= 1:
        return []
    names = _id_to_name(graph)
    return [
        ConnectionEdge(
            names[rng.choice(prev_comp)],
            names[rng.choice(comp)],
            rng.randint(50, 150),
        )
        for prev_comp, comp in zip(components, components[1:])
    ]