#!/usr/bin/env python3
"""
Synthetic Backlog Group Builder
===============================
Generates the registration rows of one backlog (repeat) exam group:
students, the backlog courses each of them carries, and whether the
registration was confirmed.

Output columns:
  student_id, roll_number, course_id, course_code, course_name, is_registered
"""

import argparse
import random
from typing import List

import numpy as np
import pandas as pd
from faker import Faker

from examroutine.models import CourseRegistration

# -----------------------------
# CONFIGURATION
# -----------------------------
RANDOM_SEED = 42
MIN_COURSES = 1
MAX_COURSES = 5  # a student may register at most 5 backlog courses per group
REGISTERED_RATIO = 0.85
DEPARTMENTS = ["CSE", "EEE", "ME", "CE", "ECE", "IPE", "MTE", "URP"]


def generate_backlog_group(
    n_students: int,
    n_courses: int,
    min_courses: int = MIN_COURSES,
    max_courses: int = MAX_COURSES,
    registered_ratio: float = REGISTERED_RATIO,
    seed: int = RANDOM_SEED,
) -> pd.DataFrame:
    random.seed(seed)
    rng = np.random.default_rng(seed)
    fake = Faker()
    Faker.seed(seed)

    # Courses, clustered by department and year so conflicts stay cohort-local
    courses = []
    for cid in range(1, n_courses + 1):
        dept = random.choice(DEPARTMENTS)
        year = random.randint(1, 4)
        courses.append({
            "course_id": str(cid),
            "course_code": f"{dept} {year}{random.randint(0, 9)}{cid % 10}{random.choice('13579')}",
            "course_name": " ".join(w.capitalize() for w in fake.words(3)),
        })
    courses_df = pd.DataFrame(courses)

    # Zipf-like popularity: a few courses are failed by many students
    popularity = rng.zipf(a=1.6, size=len(courses_df)).astype(float)
    popularity = popularity / popularity.sum()
    max_courses = min(max_courses, len(courses_df))
    min_courses = min(min_courses, max_courses)

    rows = []
    for sid in range(1, n_students + 1):
        roll = f"{random.randint(17, 22)}{random.randint(0, 99):02d}{sid:03d}"
        k = random.randint(min_courses, max_courses)
        chosen = rng.choice(len(courses_df), size=k, replace=False, p=popularity)
        for idx in chosen:
            course = courses_df.iloc[int(idx)]
            rows.append({
                "student_id": str(sid),
                "roll_number": roll,
                "course_id": course["course_id"],
                "course_code": course["course_code"],
                "course_name": course["course_name"],
                "is_registered": bool(rng.random() < registered_ratio),
            })
    return pd.DataFrame(rows)


def registrations_from_frame(df: pd.DataFrame) -> List[CourseRegistration]:
    return [
        CourseRegistration(
            student_id=row.student_id,
            course_id=row.course_id,
            course_code=row.course_code,
            course_name=getattr(row, "course_name", None),
            roll_number=getattr(row, "roll_number", None),
            is_registered=bool(getattr(row, "is_registered", True)),
        )
        for row in df.itertuples(index=False)
    ]


def main():
    p = argparse.ArgumentParser(description="Generate a synthetic backlog registration CSV")
    p.add_argument('--students', type=int, default=60)
    p.add_argument('--courses', type=int, default=25)
    p.add_argument('--seed', type=int, default=RANDOM_SEED)
    p.add_argument('--out', type=str, default='registrations.csv')
    args = p.parse_args()

    df = generate_backlog_group(args.students, args.courses, seed=args.seed)
    df.to_csv(args.out, index=False)
    registered = df[df["is_registered"]]
    print(f"Registrations: {len(df)} rows ({len(registered)} registered), "
          f"{df['student_id'].nunique()} students, {df['course_id'].nunique()} courses")
    print(f"Saved: {args.out}")


if __name__ == '__main__':
    main()
