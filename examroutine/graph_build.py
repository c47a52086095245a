import logging
from typing import Dict, Hashable, Iterable, List, Set

import networkx as nx

from .models import Course, CourseRegistration

logger = logging.getLogger(__name__)


def distinct_courses(registrations: Iterable[CourseRegistration]) -> Dict[Hashable, Course]:
    """Unique courses in first-seen order; code and name come from the first row seen."""
    courses: Dict[Hashable, Course] = {}
    for reg in registrations:
        if reg.course_id not in courses:
            courses[reg.course_id] = Course(
                course_id=reg.course_id,
                course_code=reg.course_code,
                course_name=reg.course_name,
            )
    return courses


def courses_by_student(registrations: Iterable[CourseRegistration]) -> Dict[Hashable, List[Hashable]]:
    students: Dict[Hashable, List[Hashable]] = {}
    for reg in registrations:
        taken = students.setdefault(reg.student_id, [])
        if reg.course_id not in taken:
            taken.append(reg.course_id)
    return students


def build_conflict_graph(registrations: List[CourseRegistration]) -> nx.Graph:
    """Conflict graph over courses: an edge joins two courses sharing a student.

    Nodes are added in first-seen order and carry ``code``, ``name`` and
    ``order`` (first-seen index) attributes used for tie-breaking.
    """
    G = nx.Graph()
    for i, course in enumerate(distinct_courses(registrations).values()):
        G.add_node(course.course_id, code=course.course_code, name=course.course_name, order=i)
    for exams in courses_by_student(registrations).values():
        for i in range(len(exams)):
            for j in range(i + 1, len(exams)):
                G.add_edge(exams[i], exams[j])
    logger.debug("Conflict graph: %d courses, %d edges", G.number_of_nodes(), G.number_of_edges())
    return G


def adjacency(G: nx.Graph) -> Dict[Hashable, Set[Hashable]]:
    return {u: set(G.adj[u]) for u in G.nodes()}
