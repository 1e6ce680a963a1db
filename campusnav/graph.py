"""Campus map stored as an adjacency-list graph of named locations."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field, replace


class GraphError(Exception):
    """Raised when a graph operation refers to a missing or conflicting item."""


@dataclass(frozen=True)
class LocationInfo:
    """A place on the map: its name, suggested visit time in minutes and category."""

    name: str
    visit_time: int = 0
    type: str = ""


@dataclass(frozen=True)
class Edge:
    """A directed adjacency entry from ``source`` to ``dest`` with a weight."""

    source: int
    dest: int
    weight: int


@dataclass
class _Head:
    info: LocationInfo
    adj: list[Edge] = field(default_factory=list)


class LGraph:
    """Graph of locations keyed by name, with integer vertex ids assigned in insertion order.

    In an undirected graph each road is stored as two adjacency entries, and
    ``edge_count`` counts both of them.
    """

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._heads: list[_Head] = []
        self._index: dict[str, int] = {}
        self._deleted: set[str] = set()
        self._n_verts = 0
        self._m_edges = 0

    def vertex_count(self) -> int:
        """Number of live vertices."""
        return self._n_verts

    def edge_count(self) -> int:
        """Number of stored adjacency entries."""
        return self._m_edges

    def names(self) -> dict[str, int]:
        """Mapping of live vertex names to their ids, ordered by name."""
        return dict(sorted(self._index.items()))

    def adjacency(self, vertex: int) -> tuple[Edge, ...]:
        """Edges leaving the vertex with the given id, in insertion order."""
        return tuple(self._head(vertex).adj)

    def copy(self) -> LGraph:
        """An independent copy of the graph."""
        return _copy.deepcopy(self)

    def exists_vertex(self, name: str) -> bool:
        return name in self._index and name not in self._deleted

    def exists_edge(self, x_name: str, y_name: str) -> bool:
        if not self.exists_vertex(x_name):
            return False
        return any(
            self._heads[e.dest].info.name == y_name
            for e in self._heads[self._index[x_name]].adj
        )

    def insert_vertex(self, info: LocationInfo) -> None:
        if self.exists_vertex(info.name):
            raise GraphError("Vertex already exists.")
        self._deleted.discard(info.name)
        self._index[info.name] = len(self._heads)
        self._heads.append(_Head(info))
        self._n_verts += 1

    def delete_vertex(self, name: str) -> None:
        """Remove a vertex and every edge touching it; unknown names are ignored."""
        if not self.exists_vertex(name):
            return
        vid = self._index[name]
        removed = len(self._heads[vid].adj)
        self._heads[vid].adj.clear()
        for head in self._heads:
            kept = [e for e in head.adj if e.dest != vid]
            removed += len(head.adj) - len(kept)
            head.adj = kept
        self._m_edges -= removed
        del self._index[name]
        self._deleted.add(name)
        self._n_verts -= 1

    def update_vertex(self, old_name: str, new_info: LocationInfo) -> None:
        if not self.exists_vertex(old_name):
            raise GraphError("Vertex does not exist.")
        if new_info.name != old_name and self.exists_vertex(new_info.name):
            raise GraphError("Vertex already exists.")
        vid = self._index[old_name]
        self._heads[vid].info = new_info
        if new_info.name != old_name:
            del self._index[old_name]
            self._deleted.discard(new_info.name)
            self._index[new_info.name] = vid

    def get_vertex(self, name: str) -> LocationInfo:
        if not self.exists_vertex(name):
            raise GraphError("Vertex does not exist.")
        return self._heads[self._index[name]].info

    def vertex_by_id(self, vertex: int) -> LocationInfo:
        return self._head(vertex).info

    def insert_edge(self, x_name: str, y_name: str, weight: int) -> None:
        if not (self.exists_vertex(x_name) and self.exists_vertex(y_name)):
            raise GraphError("One or both vertices do not exist.")
        x, y = self._index[x_name], self._index[y_name]
        self._heads[x].adj.append(Edge(x, y, weight))
        self._m_edges += 1
        if not self.directed:
            self._heads[y].adj.append(Edge(y, x, weight))
            self._m_edges += 1

    def delete_edge(self, x_name: str, y_name: str) -> None:
        """Remove every x-y edge; does nothing if there is none."""
        if not self.exists_edge(x_name, y_name):
            return
        self.delete_edge_by_id(self._index[x_name], self._index[y_name])

    def delete_edge_by_id(self, x: int, y: int) -> None:
        """Remove every edge between two vertex ids; out-of-range ids are ignored."""
        if not (0 <= x < len(self._heads) and 0 <= y < len(self._heads)):
            return
        self._remove_directed(x, y)
        if not self.directed:
            self._remove_directed(y, x)

    def update_edge(self, x_name: str, y_name: str, weight: int) -> None:
        if not self.exists_edge(x_name, y_name):
            raise GraphError("Edge does not exist.")
        x, y = self._index[x_name], self._index[y_name]
        self._reweight(x, y, weight)
        if not self.directed:
            self._reweight(y, x, weight)

    def get_edge(self, x_name: str, y_name: str) -> int:
        if not self.exists_edge(x_name, y_name):
            raise GraphError("Edge does not exist.")
        return next(
            e.weight
            for e in self._heads[self._index[x_name]].adj
            if self._heads[e.dest].info.name == y_name
        )

    def sorted_edges(self, reverse: bool = False) -> list[Edge]:
        """All edges ordered by weight; an undirected road appears once, low id first."""
        edges = [
            e
            for head in self._heads
            for e in head.adj
            if self.directed or e.source < e.dest
        ]
        return sorted(edges, key=lambda e: e.weight, reverse=reverse)

    def _head(self, vertex: int) -> _Head:
        if not 0 <= vertex < len(self._heads):
            raise GraphError("Invalid vertex ID.")
        return self._heads[vertex]

    def _remove_directed(self, x: int, y: int) -> None:
        head = self._heads[x]
        kept = [e for e in head.adj if e.dest != y]
        self._m_edges -= len(head.adj) - len(kept)
        head.adj = kept

    def _reweight(self, x: int, y: int, weight: int) -> None:
        head = self._heads[x]
        head.adj = [replace(e, weight=weight) if e.dest == y else e for e in head.adj]