import logging
from typing import Dict, Hashable, Sequence, Set

import networkx as nx

from ..errors import EmptyInputError
from ..graph_build import build_conflict_graph, distinct_courses
from ..models import Course, CourseRegistration, Schedule
from ..algorithms.greedy import welsh_powell, compact_colors
from ..algorithms.dsatur import dsatur

logger = logging.getLogger(__name__)

DEFAULT_ALGO = 'greedy'
DEFAULT_TIE_BREAK = 'input'
ALGOS = ('greedy', 'dsatur')


def color_courses(G: nx.Graph, algo: str = DEFAULT_ALGO, tie_break: str = DEFAULT_TIE_BREAK) -> Dict[Hashable, int]:
    if algo == 'greedy':
        color_map = welsh_powell(G, tie_break=tie_break)
    elif algo == 'dsatur':
        color_map = dsatur(G, tie_break=tie_break)
    else:
        raise ValueError("algo must be 'greedy' or 'dsatur'")
    return compact_colors(color_map)


def schedule_from_coloring(G: nx.Graph, courses: Dict[Hashable, Course],
                           coloring: Dict[Hashable, int]) -> Schedule:
    """Turn a compacted colouring (ordered by colouring step) into a Schedule."""
    schedule = Schedule()
    for course_id, day in coloring.items():
        schedule.exam_days.setdefault(day, []).append(courses[course_id])
        schedule.course_colors[course_id] = day
    schedule.exam_days = dict(sorted(schedule.exam_days.items()))
    schedule.num_days = len(schedule.exam_days)
    schedule.conflicts = {u: list(G.adj[u]) for u in G.nodes()}
    return schedule


def generate_exam_schedule(registrations: Sequence[CourseRegistration],
                           tie_break: str = DEFAULT_TIE_BREAK,
                           algo: str = DEFAULT_ALGO) -> Schedule:
    """Assign every course an exam day so that no student sits two exams a day.

    ``registrations`` must hold only registered rows of one backlog group.
    Raises EmptyInputError when there is nothing to schedule.
    """
    registrations = list(registrations)
    if not registrations:
        raise EmptyInputError()
    G = build_conflict_graph(registrations)
    coloring = color_courses(G, algo=algo, tie_break=tie_break)
    schedule = schedule_from_coloring(G, distinct_courses(registrations), coloring)
    logger.info("Scheduled %d courses over %d exam days (%s, tie-break=%s)",
                G.number_of_nodes(), schedule.num_days, algo, tie_break)
    return schedule


def partition(schedule: Schedule) -> Set[frozenset]:
    """Day groups as unordered sets of course ids."""
    return {frozenset(c.course_id for c in courses) for courses in schedule.exam_days.values()}
