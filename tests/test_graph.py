import pytest

from campusnav.graph import Edge, GraphError, LGraph, LocationInfo


@pytest.fixture
def campus():
    g = LGraph(False)
    g.insert_vertex(LocationInfo("Library", 30, "Teaching_Research_and_Administration"))
    g.insert_vertex(LocationInfo("Canteen", 20, "dining"))
    g.insert_vertex(LocationInfo("Gym", 40, "sports"))
    g.insert_edge("Library", "Canteen", 120)
    g.insert_edge("Canteen", "Gym", 80)
    return g


def test_insert_and_get_vertex(campus):
    info = campus.get_vertex("Library")
    assert info == LocationInfo("Library", 30, "Teaching_Research_and_Administration")
    assert campus.vertex_count() == 3
    assert campus.names() == {"Canteen": 1, "Gym": 2, "Library": 0}


def test_duplicate_vertex_rejected(campus):
    with pytest.raises(GraphError):
        campus.insert_vertex(LocationInfo("Gym", 5, "sports"))


def test_get_missing_vertex_raises(campus):
    with pytest.raises(GraphError):
        campus.get_vertex("Nowhere")


def test_vertex_by_id(campus):
    assert campus.vertex_by_id(2).name == "Gym"
    with pytest.raises(GraphError):
        campus.vertex_by_id(3)


def test_undirected_edges_stored_both_ways(campus):
    assert campus.edge_count() == 4
    assert campus.exists_edge("Canteen", "Library")
    assert campus.get_edge("Gym", "Canteen") == 80
    assert not campus.exists_edge("Library", "Gym")


def test_directed_graph_one_way():
    g = LGraph(True)
    g.insert_vertex(LocationInfo("A", 1, "x"))
    g.insert_vertex(LocationInfo("B", 1, "x"))
    g.insert_edge("A", "B", 7)
    assert g.exists_edge("A", "B")
    assert not g.exists_edge("B", "A")
    assert g.edge_count() == 1
    assert g.sorted_edges() == [Edge(0, 1, 7)]


def test_insert_edge_unknown_vertex(campus):
    with pytest.raises(GraphError):
        campus.insert_edge("Library", "Nowhere", 5)


def test_adjacency(campus):
    assert campus.adjacency(1) == (Edge(1, 0, 120), Edge(1, 2, 80))


def test_update_and_get_edge(campus):
    campus.update_edge("Library", "Canteen", 55)
    assert campus.get_edge("Library", "Canteen") == 55
    assert campus.get_edge("Canteen", "Library") == 55


def test_update_missing_edge_raises(campus):
    with pytest.raises(GraphError):
        campus.update_edge("Library", "Gym", 1)
    with pytest.raises(GraphError):
        campus.get_edge("Library", "Gym")


def test_delete_edge(campus):
    campus.delete_edge("Canteen", "Library")
    assert not campus.exists_edge("Library", "Canteen")
    assert not campus.exists_edge("Canteen", "Library")
    assert campus.edge_count() == 2


def test_delete_missing_edge_is_silent(campus):
    campus.delete_edge("Library", "Gym")
    assert campus.edge_count() == 4


def test_delete_edge_by_id(campus):
    campus.delete_edge_by_id(2, 1)
    assert not campus.exists_edge("Canteen", "Gym")
    assert campus.edge_count() == 2
    campus.delete_edge_by_id(0, 99)
    assert campus.edge_count() == 2


def test_delete_vertex_removes_incident_edges(campus):
    campus.delete_vertex("Canteen")
    assert not campus.exists_vertex("Canteen")
    assert campus.vertex_count() == 2
    assert campus.edge_count() == 0
    assert campus.adjacency(0) == ()
    assert "Canteen" not in campus.names()


def test_deleted_vertex_can_be_reinserted(campus):
    campus.delete_vertex("Gym")
    campus.insert_vertex(LocationInfo("Gym", 10, "sports"))
    assert campus.exists_vertex("Gym")
    assert campus.get_vertex("Gym").visit_time == 10
    assert campus.vertex_by_id(campus.names()["Gym"]).name == "Gym"


def test_update_vertex_rename(campus):
    campus.update_vertex("Gym", LocationInfo("Stadium", 40, "sports"))
    assert not campus.exists_vertex("Gym")
    assert campus.get_vertex("Stadium").type == "sports"
    assert campus.get_edge("Canteen", "Stadium") == 80


def test_update_vertex_missing_raises(campus):
    with pytest.raises(GraphError):
        campus.update_vertex("Nowhere", LocationInfo("X", 1, "y"))


def test_sorted_edges_ascending_and_deduplicated(campus):
    edges = campus.sorted_edges()
    assert [e.weight for e in edges] == [80, 120]
    assert all(e.source < e.dest for e in edges)


def test_sorted_edges_reverse(campus):
    assert [e.weight for e in campus.sorted_edges(reverse=True)] == [120, 80]


def test_copy_is_independent(campus):
    clone = campus.copy()
    clone.delete_edge("Library", "Canteen")
    clone.insert_vertex(LocationInfo("Pool", 15, "sports"))
    assert campus.exists_edge("Library", "Canteen")
    assert not campus.exists_vertex("Pool")
    assert clone.edge_count() == campus.edge_count() - 2