from navigatex.graph.dijkstra import dijkstra, reconstruct_path, single_source


def test_dijkstra_finds_direct_edge():
    # Minimal graph with a single edge 0 - 1
    adjacency = [
        [(1, 10)],
        [(0, 10)],
    ]

    path, distance = dijkstra(adjacency, 0, 1)

    assert path == [0, 1]
    assert distance == 10


def test_dijkstra_chooses_shortest_path():
    # 0 can reach 2 directly, but 0 -> 1 -> 2 is shorter
    adjacency = [
        [(1, 3), (2, 10)],
        [(0, 3), (2, 4)],
        [(0, 10), (1, 4)],
    ]

    path, distance = dijkstra(adjacency, 0, 2)

    assert path == [0, 1, 2]
    assert distance == 7


def test_dijkstra_no_path_returns_none():
    adjacency = [[], []]

    path, distance = dijkstra(adjacency, 0, 1)

    assert path == []
    assert distance is None


def test_stale_frontier_entries_are_skipped():
    # Node 1 is pushed twice (5, then 2); the stale entry must not win.
    adjacency = [
        [(1, 5), (2, 1)],
        [(0, 5), (2, 1)],
        [(0, 1), (1, 1)],
    ]

    dist, parent = single_source(adjacency, 0)

    assert dist == [0, 2, 1]
    assert parent == [None, 2, 0]
    assert reconstruct_path(parent, 0, 1) == [0, 2, 1]


def test_single_source_marks_unreachable_nodes():
    adjacency = [
        [(1, 4)],
        [(0, 4)],
        [],
    ]

    dist, parent = single_source(adjacency, 0)

    assert dist == [0, 4, None]
    assert parent == [None, 0, None]


def test_reconstruct_path_for_source():
    assert reconstruct_path([None, 0], 0, 0) == [0]
