from primer.graph import PREREQS, Graph, main_toposort, topo_sort


def test_graph_edges():
    g = Graph()
    g.add_edge("a", "b")
    g.add_edge("c", "d")
    g.add_edge("a", "d")
    g.add_edge("d", "a")
    results = [
        g.has_edge("a", "b"),
        g.has_edge("c", "d"),
        g.has_edge("a", "d"),
        g.has_edge("d", "a"),
        g.has_edge("x", "b"),
        g.has_edge("c", "d"),
        g.has_edge("x", "d"),
        g.has_edge("d", "x"),
    ]
    assert results == [True, True, True, True, False, True, False, False]


def test_has_edge_does_not_create_nodes():
    g = Graph()
    assert not g.has_edge("x", "y")
    g.add_edge("y", "x")
    assert not g.has_edge("x", "y")


def test_topo_sort_respects_prerequisites():
    order = topo_sort(PREREQS)
    position = {course: i for i, course in enumerate(order)}
    for course, needs in PREREQS.items():
        for need in needs:
            assert position[need] < position[course]


def test_topo_sort_covers_every_course_once():
    order = topo_sort(PREREQS)
    everything = set(PREREQS) | {n for needs in PREREQS.values() for n in needs}
    assert len(order) == len(set(order))
    assert set(order) == everything


def test_topo_sort_starts_with_first_chain():
    assert topo_sort(PREREQS)[:4] == [
        "intro to programming",
        "discrete math",
        "data structures",
        "algorithms",
    ]


def test_main_toposort(capsys):
    assert main_toposort([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1:\tintro to programming"
    assert len(lines) == len(topo_sort(PREREQS))