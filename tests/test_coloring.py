"""
Tests for the colouring phase: ordering, first-fit and compaction.
"""
import pytest

from examroutine.algorithms.dsatur import dsatur
from examroutine.algorithms.greedy import compact_colors, degree_order, greedy_color, welsh_powell
from examroutine.graph_build import build_conflict_graph
from examroutine.models import CourseRegistration


def _graph(rows):
    return build_conflict_graph([CourseRegistration(s, c, code) for s, c, code in rows])


class TestDegreeOrder:
    """Descending degree with a deterministic tie-break."""

    def test_ties_keep_input_order(self, regs):
        G = build_conflict_graph(regs([("s1", "D"), ("s1", "A"), ("s2", "A"), ("s2", "B"), ("s3", "C")]))
        # A has degree 2; D and B tie at 1; C is isolated
        assert degree_order(G) == ["A", "D", "B", "C"]

    def test_ties_by_course_code(self):
        G = _graph([("s1", 1, "MATH 201"), ("s1", 2, "CSE 101"), ("s2", 3, "EEE 105")])
        assert degree_order(G, tie_break="code") == [2, 1, 3]
        assert degree_order(G, tie_break="input") == [1, 2, 3]

    def test_unknown_tie_break(self, regs):
        G = build_conflict_graph(regs([("s1", "A")]))
        with pytest.raises(ValueError):
            degree_order(G, tie_break="random")


class TestGreedyColor:
    """First-fit colouring."""

    def test_smallest_free_color(self, regs):
        G = build_conflict_graph(regs([("s1", "A"), ("s1", "B"), ("s2", "B"), ("s2", "C")]))
        assert greedy_color(G, ["B", "A", "C"]) == {"B": 0, "A": 1, "C": 1}

    def test_welsh_powell_isolated_nodes_share_color(self, regs):
        G = build_conflict_graph(regs([("s1", "A"), ("s2", "B"), ("s3", "C")]))
        assert set(welsh_powell(G).values()) == {0}

    def test_compact_colors_by_first_appearance(self):
        assert compact_colors({"a": 2, "b": 0, "c": 2, "d": 5}) == {"a": 0, "b": 1, "c": 0, "d": 2}


class TestDsatur:
    """DSATUR colouring."""

    def test_valid_on_odd_cycle(self, regs):
        # five-cycle needs three colours
        G = build_conflict_graph(regs([
            ("s1", "A"), ("s1", "B"), ("s2", "B"), ("s2", "C"), ("s3", "C"), ("s3", "D"),
            ("s4", "D"), ("s4", "E"), ("s5", "E"), ("s5", "A"),
        ]))
        coloring = dsatur(G)
        assert all(coloring[u] != coloring[v] for u, v in G.edges())
        assert len(set(coloring.values())) == 3

    def test_deterministic(self, triangle_regs):
        G = build_conflict_graph(triangle_regs)
        assert list(dsatur(G).items()) == list(dsatur(G).items())
