from algocraft.scc import strongly_connected_components

CLRS = {
    "a": ["b"],
    "b": ["c", "e", "f"],
    "c": ["d", "g"],
    "d": ["c", "h"],
    "e": ["a", "f"],
    "f": ["g"],
    "g": ["f", "h"],
    "h": ["h"],
}


def test_textbook_components():
    components = strongly_connected_components(CLRS)
    assert {frozenset(c) for c in components} == {
        frozenset({"a", "b", "e"}),
        frozenset({"c", "d"}),
        frozenset({"f", "g"}),
        frozenset({"h"}),
    }


def test_first_component_holds_last_finished_root():
    components = strongly_connected_components(CLRS)
    assert set(components[0]) == {"a", "b", "e"}
    assert components[0][0] == "a"


def test_components_partition_vertices():
    components = strongly_connected_components(CLRS)
    flat = [v for c in components for v in c]
    assert sorted(flat) == sorted(CLRS)
    assert len(flat) == len(set(flat))


def test_dag_has_singleton_components_in_topological_order():
    dag = {1: [2, 3], 2: [4], 3: [4], 4: []}
    components = strongly_connected_components(dag)
    assert all(len(c) == 1 for c in components)
    position = {c[0]: i for i, c in enumerate(components)}
    for u, successors in dag.items():
        for v in successors:
            assert position[u] < position[v]


def test_weighted_mapping_and_target_only_vertices():
    graph = {"x": {"y": 3}, "y": {"x": 1, "z": 2}}
    components = strongly_connected_components(graph)
    assert {frozenset(c) for c in components} == {
        frozenset({"x", "y"}),
        frozenset({"z"}),
    }