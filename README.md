# campusnav

campusnav models a campus as a weighted graph of named locations joined by roads. It answers route questions on that graph:

- the shortest path between two places (Dijkstra);
- a minimum spanning tree of the roads (Kruskal, with a union–find structure);
- whether an Euler circuit exists, and one such circuit when it does;
- the shortest route that follows a given order of places;
- a greedy tour of every teaching building, starting from a gate;
- suggested roads that would join the separate parts of a disconnected campus.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Data files

Two CSV files without header lines describe the campus.

The nodes file has one line per location, in the form `name,type,visit_time_minutes`:

```
Library,Teaching_Research_and_Administration,30
Canteen,dining,10
```

The edges file has one line per road, in the form `from,to,length_metres`:

```
Library,Canteen,120
```

Locations whose type is `Teaching_Research_and_Administration` are the teaching buildings that the tour planner visits.

## Command line

```
campusnav [--nodes NODES] [--edges EDGES]
```

By default the command loads `nodes.csv` and `edges.csv` from the current directory. If a file cannot be read or holds bad data, it prints an error and exits with status 1. Otherwise it reads answers from standard input and shows a numbered menu:

1. Location operations. You can show one location or all of them, add or delete a location, or save all locations to `test_nodes.csv`. You can also change a location's visit time or list the locations of a given type.
2. Road operations. You can show one road or all of them, add or delete a road, or save all roads to `test_edges.csv`. You can also change a road's length or list the roads at a location.
3. Reload the graph from the data files.
4. Check whether the campus is connected. If it is not, the program suggests roads with random ends and lengths of 50–150 m, and adds them if you answer `y`.
5. Check whether an Euler circuit exists.
6. Find the shortest path between two locations.
7. Print the minimum spanning tree and its total length.
8. Find the shortest path through a given sequence of locations. You first enter how many locations there are, then their names.
9. Plan a tour of all teaching buildings from one of the gates `Gate_788_Zaoyang_Road`, `Gate_460_Zaoyang_Road` or `Jinshajiang_Road_Gate`.

Choose 10, or any other number, to quit. The program also quits at the end of input. Changes are kept in memory only; they reach disk only through the two save options, which write to `test_nodes.csv` and `test_edges.csv`, not to the files that were loaded.

## Library use

```python
from campusnav.graph import LGraph, LocationInfo
from campusnav.algorithms import shortest_path, minimum_spanning_tree, is_connected

graph = LGraph(directed=False)
graph.insert_vertex(LocationInfo("Gate", 0, "gate"))
graph.insert_vertex(LocationInfo("Library", 30, "Teaching_Research_and_Administration"))
graph.insert_edge("Gate", "Library", 200)

result = shortest_path(graph, "Gate", "Library")
print(result.distance, result.path_string)   # 200 Gate Library
print(is_connected(graph))                   # True
print(minimum_spanning_tree(graph))          # [Edge(source=0, dest=1, weight=200)]
```

### `campusnav.graph`

- `LGraph(directed=False)` is the graph. Vertices get integer ids in insertion order. Its methods are:
  - `insert_vertex`, `delete_vertex`, `update_vertex`, `get_vertex` and `vertex_by_id` for locations;
  - `insert_edge`, `delete_edge`, `delete_edge_by_id`, `update_edge` and `get_edge` for roads;
  - `exists_vertex`, `exists_edge`, `names`, `adjacency` and `sorted_edges` for lookups;
  - `vertex_count`, `edge_count` and `copy`.

  In an undirected graph each road is stored in both directions, so `edge_count` counts it twice.
- `LocationInfo(name, visit_time, type)` and `Edge(source, dest, weight)` are immutable records.
- `GraphError` is raised for missing or duplicate locations and roads.

### `campusnav.algorithms`

- `shortest_path(graph, x_name, y_name)` returns a `ShortestPathResult`. Its `distance` is `None` when the target cannot be reached.
- `topological_shortest_path(graph, path)` returns a `TopologicalPathResult`.
- `minimum_spanning_tree(graph)` returns a list of `Edge`.
- `has_euler_circuit(graph)` returns a bool. `euler_circuit(graph)` returns a list of vertex ids, or an empty list when no circuit exists. `get_circuit(graph, start)` is the walking step that `euler_circuit` uses; it changes the graph it is given.
- `bfs(graph, start)` and `is_connected(graph)` answer reachability questions.
- `plan_teaching_visit(graph, start_gate)` returns a `PlanVisitResult`.
- `connection_suggestions(graph, rng=None)` returns a list of `ConnectionEdge`. Pass a `random.Random` to get repeatable suggestions.
- `DSU(n)` is a union–find structure with `find`, `unite` and `same`.

### `campusnav.cli`

- `read_nodes`, `read_edges`, `load_graph`, `store_nodes` and `store_edges` read and write the CSV files.
- `format_nodes` and `format_edges` return the lines the menu prints.
- `Road` holds one line of the edges file.
- `main(argv=None)` runs the interactive menu.