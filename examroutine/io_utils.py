import csv
import io
import json
import os
from typing import Dict, IO, Iterable, List, Union

from .models import CourseRegistration, RoutineEntry, Schedule

TextOrPath = Union[str, os.PathLike, IO]

REQUIRED_COLUMNS = ('student_id', 'course_id', 'course_code')
DATE_COLUMNS = ('day_index', 'date')
TRUTHY = {'1', 'true', 'yes', 'y', 't'}


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    Ensures CSV readers get strings, not bytes.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def _optional(row: Dict[str, str], name: str):
    value = (row.get(name) or '').strip()
    return value or None


def load_registrations(src: TextOrPath) -> List[CourseRegistration]:
    """CSV student_id,course_id,course_code[,course_name,roll_number,is_registered]."""
    regs: List[CourseRegistration] = []
    f, should_close = _open_text(src)
    try:
        r = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (r.fieldnames or [])]
        if missing:
            raise ValueError(f"registrations CSV is missing column(s): {', '.join(missing)}")
        for row in r:
            flag = _optional(row, 'is_registered')
            regs.append(CourseRegistration(
                student_id=str(row['student_id']).strip(),
                course_id=str(row['course_id']).strip(),
                course_code=str(row['course_code']).strip(),
                course_name=_optional(row, 'course_name'),
                roll_number=_optional(row, 'roll_number'),
                is_registered=True if flag is None else flag.lower() in TRUTHY,
            ))
    finally:
        if should_close:
            f.close()
    return regs


def load_exam_dates(src: TextOrPath) -> Dict[int, str]:
    """CSV day_index,date (0-based day index)."""
    dates: Dict[int, str] = {}
    f, should_close = _open_text(src)
    try:
        r = csv.DictReader(f)
        missing = [c for c in DATE_COLUMNS if c not in (r.fieldnames or [])]
        if missing:
            raise ValueError(f"dates CSV is missing column(s): {', '.join(missing)}")
        for row in r:
            dates[int(row['day_index'])] = (row.get('date') or '').strip()
    finally:
        if should_close:
            f.close()
    return dates


def write_schedule_csv(f: IO, schedule: Schedule):
    w = csv.writer(f)
    w.writerow(['day_index', 'course_id', 'course_code'])
    for day, courses in schedule.exam_days.items():
        for c in courses:
            w.writerow([day, c.course_id, c.course_code])


def write_routine_csv(f: IO, entries: Iterable[RoutineEntry]):
    w = csv.writer(f)
    w.writerow(['date', 'course_code', 'course_name', 'roll_numbers'])
    for e in entries:
        w.writerow([e.date.isoformat(), e.course_code, e.course_name or '', e.roll_numbers])


def save_schedule_csv(path: str, schedule: Schedule):
    with open(path, 'w', newline='') as f:
        write_schedule_csv(f, schedule)


def save_schedule_json(path: str, schedule: Schedule):
    with open(path, 'w') as f:
        json.dump(schedule.to_dict(), f, indent=2, default=str)


def save_routine_csv(path: str, entries: Iterable[RoutineEntry]):
    with open(path, 'w', newline='') as f:
        write_routine_csv(f, entries)
