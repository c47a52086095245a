from typing import Hashable, Iterable, List, Tuple
import networkx as nx

from ..graph_build import courses_by_student
from ..models import CourseRegistration, Schedule

def conflicts_ok(G: nx.Graph, sched: Schedule) -> bool:
    for u, v in G.edges():
        if sched.day_of(u) == sched.day_of(v):
            return False
    return True

def coverage_ok(G: nx.Graph, sched: Schedule) -> bool:
    placed = [c.course_id for courses in sched.exam_days.values() for c in courses]
    if len(placed) != len(set(placed)) or set(placed) != set(G.nodes()):
        return False
    if sorted(sched.exam_days) != list(range(sched.num_days)):
        return False
    return all(sched.exam_days.values())

def student_conflicts(registrations: Iterable[CourseRegistration],
                      sched: Schedule) -> List[Tuple[Hashable, int, List[Hashable]]]:
    """Every (student, day, courses) where a student sits more than one exam a day."""
    clashes = []
    for sid, exams in courses_by_student(registrations).items():
        by_day = {}
        for ex in exams:
            by_day.setdefault(sched.day_of(ex), []).append(ex)
        for day, same_day in by_day.items():
            if len(same_day) > 1:
                clashes.append((sid, day, same_day))
    return clashes
