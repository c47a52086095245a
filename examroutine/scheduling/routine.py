"""Attach calendar dates to a schedule and build the printable routine."""
import logging
from datetime import date, datetime, timedelta
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Union

from ..errors import DuplicateDateError, MissingDateError
from ..models import CourseRegistration, RoutineEntry, Schedule

logger = logging.getLogger(__name__)

DateLike = Union[date, str, None]


def registered_only(registrations: Iterable[CourseRegistration]) -> List[CourseRegistration]:
    return [r for r in registrations if r.is_registered]


def default_exam_dates(num_days: int, start: Optional[date] = None) -> Dict[int, date]:
    """Consecutive dates, the first one the day after ``start`` (today by default)."""
    start = start or date.today()
    return {i: start + timedelta(days=1 + i) for i in range(num_days)}


def parse_date(value: DateLike) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value = str(value).strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"invalid exam date {value!r}; expected YYYY-MM-DD")


def check_exam_dates(schedule: Schedule,
                     exam_dates: Union[Mapping[int, DateLike], Sequence[DateLike]]) -> Dict[int, date]:
    """Return one distinct date per exam day, refusing blank or shared dates."""
    if hasattr(exam_dates, "items"):
        lookup = {int(k): v for k, v in exam_dates.items()}
    else:
        lookup = dict(enumerate(exam_dates))
    dates: Dict[int, date] = {}
    missing = []
    for day in range(schedule.num_days):
        d = parse_date(lookup.get(day))
        if d is None:
            missing.append(day)
        else:
            dates[day] = d
    if missing:
        logger.warning("Routine refused: %d of %d exam days have no date", len(missing), schedule.num_days)
        raise MissingDateError(missing)
    by_date: Dict[str, List[int]] = {}
    for day, d in dates.items():
        by_date.setdefault(d.isoformat(), []).append(day)
    clashes = {d: days for d, days in by_date.items() if len(days) > 1}
    if clashes:
        logger.warning("Routine refused: %d dates shared by several exam days", len(clashes))
        raise DuplicateDateError(clashes)
    return dates


def roll_numbers_by_course(registrations: Iterable[CourseRegistration]) -> Dict[Hashable, List[str]]:
    rolls: Dict[Hashable, List[str]] = {}
    for reg in registrations:
        bucket = rolls.setdefault(reg.course_id, [])
        if reg.roll_number:
            bucket.append(str(reg.roll_number))
    return rolls


def build_routine(schedule: Schedule,
                  exam_dates: Union[Mapping[int, DateLike], Sequence[DateLike]],
                  registrations: Iterable[CourseRegistration] = ()) -> List[RoutineEntry]:
    """One entry per scheduled course, sorted by date then course code."""
    dates = check_exam_dates(schedule, exam_dates)
    rolls = roll_numbers_by_course(registrations)
    entries = []
    for day, courses in schedule.exam_days.items():
        for course in courses:
            entries.append(RoutineEntry(
                course_code=course.course_code,
                course_name=course.course_name,
                date=dates[day],
                roll_numbers=", ".join(sorted(rolls.get(course.course_id, []))),
            ))
    entries.sort(key=lambda e: (e.date, str(e.course_code)))
    return entries


def routine_by_date(entries: Iterable[RoutineEntry]) -> Dict[date, List[RoutineEntry]]:
    grouped: Dict[date, List[RoutineEntry]] = {}
    for e in entries:
        grouped.setdefault(e.date, []).append(e)
    return grouped
