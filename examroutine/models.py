from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Hashable, List, Optional

@dataclass
class CourseRegistration:
    student_id: Hashable
    course_id: Hashable
    course_code: str
    course_name: Optional[str] = None
    roll_number: Optional[str] = None
    is_registered: bool = True

@dataclass
class Course:
    course_id: Hashable
    course_code: str
    course_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.course_id, "code": self.course_code, "name": self.course_name}

@dataclass
class Schedule:
    num_days: int = 0
    # day index -> courses sitting that day, in colouring order
    exam_days: Dict[int, List[Course]] = field(default_factory=dict)
    # course_id -> day index
    course_colors: Dict[Hashable, int] = field(default_factory=dict)
    # course_id -> conflicting course ids
    conflicts: Dict[Hashable, List[Hashable]] = field(default_factory=dict)

    def day_of(self, course_id: Hashable) -> Optional[int]:
        return self.course_colors.get(course_id)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready shape returned by the routine endpoint."""
        return {
            "numDays": self.num_days,
            "examDays": {str(day): [c.to_dict() for c in courses]
                         for day, courses in self.exam_days.items()},
            "courseColors": {str(cid): day for cid, day in self.course_colors.items()},
            "conflicts": {str(cid): list(nbrs) for cid, nbrs in self.conflicts.items()},
        }

@dataclass
class RoutineEntry:
    course_code: str
    date: date
    course_name: Optional[str] = None
    roll_numbers: str = ""
