import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import json
import tempfile
import time

import pandas as pd
import streamlit as st

from examroutine.errors import RoutineError
from examroutine.graph_build import build_conflict_graph
from examroutine.io_utils import load_registrations, write_schedule_csv, write_routine_csv
from examroutine.reports import export_routine_pdf
from examroutine.scheduling.assign_days import generate_exam_schedule
from examroutine.scheduling.evaluation import summary
from examroutine.scheduling.routine import registered_only, default_exam_dates, build_routine
from format_data import generate_backlog_group, registrations_from_frame

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="Backlog Exam Routine", layout="wide")
st.title("Backlog Exam Routine – Graph Colouring Scheduler")

# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def load_registrations_cached(reg_bytes: bytes):
    return load_registrations(io.BytesIO(reg_bytes))

@st.cache_data
def synthetic_cached(n_students: int, n_courses: int, seed: int = 42):
    return registrations_from_frame(generate_backlog_group(n_students, n_courses, seed=seed))

def _pdf_bytes(entries, title: str) -> bytes:
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "routine.pdf")
        export_routine_pdf(path, entries, title=title)
        with open(path, "rb") as f:
            return f.read()

# ---------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------
st.subheader("Inputs")
mode = st.radio("Registrations", ["Upload CSV", "Synthetic"], horizontal=True)
with st.form("controls"):
    if mode == "Upload CSV":
        reg_file = st.file_uploader("Registrations CSV (student_id,course_id,course_code,...)", type=["csv"])
        n_students = n_courses = None
    else:
        reg_file = None
        c1, c2 = st.columns(2)
        n_students = c1.number_input("Students", 1, 5000, 60, step=10)
        n_courses = c2.number_input("Backlog courses", 1, 500, 25, step=5)
    c3, c4, c5 = st.columns(3)
    algo = c3.selectbox("Colouring", ["greedy", "dsatur"], index=0)
    tie_break = c4.selectbox("Tie-break for equal degree", ["input", "code"], index=0)
    include_unregistered = c5.checkbox("Include unregistered rows", value=False)
    group_name = st.text_input("Group name", "Backlog Group")
    submitted = st.form_submit_button("Generate Schedule")

if submitted:
    if mode == "Upload CSV":
        if reg_file is None:
            st.error("Please upload a registrations CSV.")
            st.stop()
        try:
            regs = load_registrations_cached(reg_file.getvalue())
        except ValueError as e:
            st.error(str(e))
            st.stop()
    else:
        regs = synthetic_cached(int(n_students), int(n_courses))
    if not include_unregistered:
        regs = registered_only(regs)

    t0 = time.perf_counter()
    try:
        schedule = generate_exam_schedule(regs, tie_break=tie_break, algo=algo)
    except RoutineError as e:
        st.error(str(e))
        st.stop()
    st.session_state.result = {
        "regs": regs,
        "schedule": schedule,
        "group": group_name,
        "summary": summary(build_conflict_graph(regs), schedule),
        "elapsed": time.perf_counter() - t0,
    }

# ---------------------------------------------------------------------
# Schedule + dates
# ---------------------------------------------------------------------
result = st.session_state.get("result")
if result:
    schedule = result["schedule"]
    st.subheader(f"{result['group']} – Exam Schedule")
    st.caption(f"{schedule.num_days} exam days required · "
               f"{len(schedule.course_colors)} courses · "
               f"{len({r.student_id for r in result['regs']})} students · "
               f"{result['elapsed']:.3f}s")
    st.text(result["summary"])
    st.dataframe(pd.DataFrame([
        {"day": day + 1, "course_code": c.course_code, "course_name": c.course_name}
        for day, courses in schedule.exam_days.items() for c in courses
    ]), use_container_width=True)

    sch_buf = io.StringIO()
    write_schedule_csv(sch_buf, schedule)
    colA, colB = st.columns(2)
    colA.download_button("Download schedule.csv", sch_buf.getvalue(), file_name="schedule.csv", mime="text/csv")
    colB.download_button("Download schedule.json", json.dumps(schedule.to_dict(), indent=2, default=str),
                         file_name="schedule.json", mime="application/json")

    st.subheader("Exam dates")
    defaults = default_exam_dates(schedule.num_days)
    cols = st.columns(2 if schedule.num_days > 4 else 1)
    exam_dates = {}
    for day in range(schedule.num_days):
        n = len(schedule.exam_days[day])
        exam_dates[day] = cols[day % len(cols)].date_input(
            f"Exam Day {day + 1} ({n} {'course' if n == 1 else 'courses'})",
            value=defaults[day], key=f"date-{day}",
        )

    if st.button("Generate Routine"):
        try:
            entries = build_routine(schedule, exam_dates, result["regs"])
        except RoutineError as e:
            st.error(str(e))
            st.stop()
        routine_buf = io.StringIO()
        write_routine_csv(routine_buf, entries)
        colC, colD = st.columns(2)
        colC.download_button("Download routine.csv", routine_buf.getvalue(), file_name="routine.csv", mime="text/csv")
        colD.download_button("Download routine.pdf", _pdf_bytes(entries, f"{result['group']} - Exam Routine"),
                             file_name="routine.pdf", mime="application/pdf")
        st.success("Routine ready.")
