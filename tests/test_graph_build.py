"""
Tests for conflict graph construction.
"""
from examroutine.graph_build import adjacency, build_conflict_graph, courses_by_student, distinct_courses
from examroutine.models import CourseRegistration


class TestDistinctCourses:
    """Course set derived from registration rows."""

    def test_first_seen_order(self, regs):
        courses = distinct_courses(regs([("s1", "B"), ("s2", "A"), ("s3", "B"), ("s1", "C")]))
        assert list(courses) == ["B", "A", "C"]

    def test_first_code_wins(self):
        rows = [
            CourseRegistration("s1", 7, "CSE 1101", "Structured Programming"),
            CourseRegistration("s2", 7, "CSE-1101", "Other Name"),
        ]
        course = distinct_courses(rows)[7]
        assert course.course_code == "CSE 1101"
        assert course.course_name == "Structured Programming"

    def test_duplicate_rows_collapse_per_student(self, regs):
        assert courses_by_student(regs([("s1", "A"), ("s1", "A"), ("s1", "B")])) == {"s1": ["A", "B"]}


class TestConflictGraph:
    """Edges join courses that share at least one student."""

    def test_nodes_carry_order_and_code(self, regs):
        G = build_conflict_graph(regs([("s1", "X"), ("s2", "Y")]))
        assert list(G.nodes()) == ["X", "Y"]
        assert G.nodes["Y"]["order"] == 1
        assert G.nodes["X"]["code"] == "C-X"

    def test_pairwise_edges_per_student(self, regs):
        G = build_conflict_graph(regs([("s1", "A"), ("s1", "B"), ("s1", "C"), ("s2", "D")]))
        assert G.number_of_edges() == 3
        assert G.degree("D") == 0
        assert adjacency(G)["A"] == {"B", "C"}

    def test_shared_pair_deduplicated(self, regs):
        G = build_conflict_graph(regs([("s1", "A"), ("s1", "B"), ("s2", "B"), ("s2", "A")]))
        assert G.number_of_edges() == 1

    def test_no_self_edges(self, regs):
        G = build_conflict_graph(regs([("s1", "A"), ("s1", "A")]))
        assert G.number_of_edges() == 0
        assert G.number_of_nodes() == 1
