"""
Tests for the evaluation summary and PDF routine.
"""
from datetime import date, timedelta

from reportlab import rl_config

from examroutine.graph_build import build_conflict_graph
from examroutine.models import RoutineEntry
from examroutine.reports import export_routine_pdf
from examroutine.scheduling.assign_days import generate_exam_schedule
from examroutine.scheduling.evaluation import _greedy_clique_lb, summary
from examroutine.scheduling.validation import coverage_ok, student_conflicts


class TestSummary:
    """Text report of a schedule."""

    def test_triangle_summary(self, triangle_regs):
        G = build_conflict_graph(triangle_regs)
        text = summary(G, generate_exam_schedule(triangle_regs))
        assert "Courses: 3  Conflict edges: 3" in text
        assert "Exam days used: 3" in text
        assert "Clique lower bound: 3" in text
        assert "Valid (conflicts): True  Valid (coverage): True" in text

    def test_clique_bound_isolated(self, regs):
        G = build_conflict_graph(regs([("s1", "A"), ("s2", "B")]))
        assert _greedy_clique_lb(G) == 1


class TestValidation:
    """Detecting broken schedules."""

    def test_same_day_clash_detected(self, regs):
        rows = regs([("s1", "A"), ("s1", "B")])
        schedule = generate_exam_schedule(rows)
        schedule.exam_days[0].extend(schedule.exam_days.pop(1))
        schedule.course_colors["B"] = 0
        schedule.num_days = 1
        assert student_conflicts(rows, schedule) == [("s1", 0, ["A", "B"])]
        assert coverage_ok(build_conflict_graph(rows), schedule)

    def test_missing_course_breaks_coverage(self, regs):
        rows = regs([("s1", "A"), ("s2", "B")])
        schedule = generate_exam_schedule(rows)
        schedule.exam_days[0].pop()
        assert not coverage_ok(build_conflict_graph(rows), schedule)


class TestRoutinePdf:
    """reportlab rendering of the dated routine."""

    def test_writes_multi_page_pdf(self, tmp_path):
        start = date(2026, 3, 2)
        entries = [
            RoutineEntry(course_code=f"CSE {1000 + i}", date=start + timedelta(days=i // 4),
                         course_name="Course", roll_numbers="1903001, 1903002")
            for i in range(120)
        ]
        path = tmp_path / "routine.pdf"
        export_routine_pdf(str(path), entries, title="Backlog Group 1")
        data = path.read_bytes()
        assert data.startswith(b"%PDF")
        assert data.rstrip().endswith(b"%%EOF")

    def test_long_roll_list_wraps_without_losing_students(self, tmp_path, monkeypatch):
        monkeypatch.setattr(rl_config, "pageCompression", 0)
        rolls = [str(1903000 + i) for i in range(30)]
        entry = RoutineEntry(course_code="CSE 2101", date=date(2026, 3, 2),
                             course_name="Data Structures", roll_numbers=", ".join(rolls))
        path = tmp_path / "routine.pdf"
        export_routine_pdf(str(path), [entry])
        data = path.read_bytes()
        assert [r for r in rolls if r.encode() not in data] == []
