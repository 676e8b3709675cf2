import pytest

from algorithms import DisjointSet, InvalidGraph


def test_every_node_starts_as_its_own_root():
    dsu = DisjointSet(["A", "B", "C"])
    assert dsu.parent == {"A": "A", "B": "B", "C": "C"}
    assert dsu.rank == {"A": 0, "B": 0, "C": 0}
    assert dsu.component_count() == 3
    assert len(dsu) == 3
    assert "B" in dsu and "Z" not in dsu


def test_empty_node_set_is_rejected():
    with pytest.raises(InvalidGraph):
        DisjointSet([])


def test_union_on_equal_ranks_attaches_second_root_under_first():
    dsu = DisjointSet(["A", "B"])
    assert dsu.union("A", "B") is True
    assert dsu.parent["B"] == "A"
    assert dsu.rank["A"] == 1
    assert dsu.rank["B"] == 0


def test_union_by_rank_keeps_taller_root():
    dsu = DisjointSet(["A", "B", "C"])
    dsu.union("A", "B")          # A has rank 1
    dsu.union("C", "A")          # C rank 0 goes under A
    assert dsu.parent["C"] == "A"
    assert dsu.rank["A"] == 1


def test_union_within_one_set_reports_cycle():
    dsu = DisjointSet(["A", "B", "C"])
    dsu.union("A", "B")
    dsu.union("B", "C")
    before = dict(dsu.parent)
    assert dsu.union("A", "C") is False
    assert dsu.connected("A", "C")
    assert dsu.component_count() == 1
    # only compression may have happened; roots are unchanged
    assert {dsu.find(n) for n in before} == {"A"}


def test_find_compresses_the_walked_path():
    dsu = DisjointSet(["A", "B", "C", "D"])
    # hand-built chain D -> C -> B -> A
    dsu.parent.update({"B": "A", "C": "B", "D": "C"})
    assert dsu.find("D") == "A"
    assert dsu.parent["D"] == "A"
    assert dsu.parent["C"] == "A"
    assert dsu.parent["B"] == "A"


def test_find_handles_long_chains_without_recursion():
    ids = [f"n{i}" for i in range(5000)]
    dsu = DisjointSet(ids)
    for child, parent in zip(ids[1:], ids):
        dsu.parent[child] = parent
    assert dsu.find(ids[-1]) == "n0"
    assert dsu.parent[ids[-1]] == "n0"


def test_snapshot_is_isolated_from_later_unions():
    dsu = DisjointSet(["A", "B", "C"])
    dsu.union("A", "B")
    snap = dsu.snapshot()
    dsu.union("A", "C")

    assert snap.parents == {"A": "A", "B": "A", "C": "C"}
    assert snap.ranks["A"] == 1
    with pytest.raises(TypeError):
        snap.parents["C"] = "A"


def test_snapshot_components_group_by_root():
    dsu = DisjointSet(["A", "B", "C", "D"])
    dsu.union("A", "B")
    dsu.union("C", "D")
    snap = dsu.snapshot()
    assert snap.components() == {"A": ["A", "B"], "C": ["C", "D"]}
    assert snap.root_of("B") == "A"
    assert snap.to_dict()["parents"]["D"] == "C"
