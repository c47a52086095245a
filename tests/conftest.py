import pytest

from examroutine.models import CourseRegistration


def make_regs(pairs, **extra):
    """Registrations from (student_id, course_id) pairs; course code mirrors the id."""
    return [CourseRegistration(student_id=s, course_id=c, course_code=f"C-{c}", **extra) for s, c in pairs]


@pytest.fixture
def triangle_regs():
    # every pair of A, B, C shares a student
    return make_regs([("s1", "A"), ("s1", "B"), ("s2", "B"), ("s2", "C"), ("s3", "A"), ("s3", "C")])


@pytest.fixture
def regs():
    return make_regs
