import pytest

from route_provider.adapters.graph import InMemoryRouteGraph
from route_provider.config import DEFAULT_ROUTES, GraphConfig
from route_provider.domain.errors import InvalidGraphError
from route_provider.domain.models import Route


def test_graph_contains_all_academies(academy_graph):
    assert academy_graph.academies() == ("A", "B", "D", "E", "C")
    assert len(academy_graph) == 5
    assert academy_graph.route_count == 9

    for academy in "ABCDE":
        assert academy_graph.has_academy(academy)
        assert academy in academy_graph


def test_outgoing_routes_keep_construction_order(academy_graph):
    assert academy_graph.outgoing_routes("A") == (
        Route("A", "B", 5),
        Route("A", "D", 5),
        Route("A", "E", 7),
    )
    assert academy_graph.outgoing_routes("E") == (Route("E", "B", 3),)


def test_every_route_is_stored_under_its_origin(academy_graph):
    for academy in academy_graph.academies():
        for route in academy_graph.outgoing_routes(academy):
            assert route.origin == academy


def test_unknown_academy_has_no_routes(academy_graph):
    assert academy_graph.outgoing_routes("Z") == ()
    assert not academy_graph.has_academy("Z")


def test_destination_only_academy_is_a_dead_end():
    graph = InMemoryRouteGraph(routes=[("A", "B", 1)])

    assert graph.has_academy("B")
    assert graph.outgoing_routes("B") == ()


def test_parallel_routes_and_self_loops_are_allowed():
    graph = InMemoryRouteGraph(routes=[("A", "B", 1), ("A", "B", 2), ("A", "A", 0)])

    assert len(graph.outgoing_routes("A")) == 3


def test_from_config_uses_configured_routes():
    graph = InMemoryRouteGraph.from_config(GraphConfig(routes=[("X", "Y", 4)]))

    assert graph.academies() == ("X", "Y")
    assert graph.outgoing_routes("X") == (Route("X", "Y", 4),)


def test_from_config_defaults_to_academy_dataset():
    graph = InMemoryRouteGraph.from_config(GraphConfig())

    assert graph.route_count == len(DEFAULT_ROUTES)


@pytest.mark.parametrize(
    "routes, index",
    [
        ([("A", "B", -1)], 0),
        ([("A", "B", 1), ("B", "C", -5)], 1),
        ([("A", "B", 1.5)], 0),
        ([("A", "B", "3")], 0),
        ([("A", "B", True)], 0),
        ([("A", "B")], 0),
        (["AB5"], 0),
        ([("", "B", 1)], 0),
        ([("A", None, 1)], 0),
    ],
)
def test_malformed_routes_are_rejected(routes, index):
    with pytest.raises(InvalidGraphError) as excinfo:
        InMemoryRouteGraph(routes=routes)

    assert excinfo.value.route_index == index


def test_zero_distance_is_valid():
    graph = InMemoryRouteGraph(routes=[("A", "B", 0)])

    assert graph.outgoing_routes("A") == (Route("A", "B", 0),)


def test_graph_is_read_only(academy_graph):
    routes = academy_graph.outgoing_routes("A")

    assert isinstance(routes, tuple)
    with pytest.raises(AttributeError):
        routes[0].distance = 1  # type: ignore[misc]


def test_academy_ids_are_normalized():
    graph = InMemoryRouteGraph(routes=[(" a", "b ", 3), ("B", "c", 1)])

    assert graph.academies() == ("A", "B", "C")
    assert graph.has_academy("A")
    assert not graph.has_academy("a")
    assert graph.outgoing_routes("A") == (Route("A", "B", 3),)
    assert graph.outgoing_routes("B") == (Route("B", "C", 1),)


def test_empty_route_list_is_rejected():
    with pytest.raises(InvalidGraphError):
        InMemoryRouteGraph(routes=[])

    with pytest.raises(InvalidGraphError):
        InMemoryRouteGraph.from_config(GraphConfig(routes=[]))
