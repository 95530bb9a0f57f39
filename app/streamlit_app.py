import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import random
import time

import streamlit as st

from roomfit.demo import demo_courses, demo_rooms
from roomfit.io_utils import load_courses, load_rooms, write_assignment
from roomfit.experiments.generator import generate_courses, generate_rooms
from roomfit.experiments.runner import rooms_for, run_detailed_experiment
from roomfit.scheduling.room_assignment import GreedyAssignmentSolver
from roomfit.scheduling.evaluation import summary, assignment_table

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="RoomFit – Room Assignment", layout="wide")
st.title("RoomFit – Greedy Course-to-Room Assignment")

# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def load_inputs_cached(courses_bytes: bytes, rooms_bytes: bytes):
    return load_courses(io.BytesIO(courses_bytes)), load_rooms(io.BytesIO(rooms_bytes))

@st.cache_data
def build_synthetic_cached(n: int, seed: int = 42):
    rng = random.Random(seed)
    return generate_courses(n, rng), generate_rooms(rooms_for(n), rng)

@st.cache_data
def run_detailed_cached(iterations: int, counts: tuple, seed: int):
    return run_detailed_experiment(iterations, list(counts), seed=seed)

# ---------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------
tab_solve, tab_exp = st.tabs(["Assign rooms", "Experiments"])

with tab_solve:
    mode = st.radio("Input mode", ["Demo", "Upload CSVs", "Synthetic"], horizontal=True)
    with st.form("controls"):
        if mode == "Upload CSVs":
            c1, c2 = st.columns(2)
            courses_file = c1.file_uploader("Courses CSV (id,name,enrollment,schedule)", type=["csv"])
            rooms_file = c2.file_uploader("Rooms CSV (id,name,capacity)", type=["csv"])
            n = seed = None
        elif mode == "Synthetic":
            courses_file = rooms_file = None
            c1, c2 = st.columns(2)
            n = c1.number_input("Synthetic courses (N)", 1, 5000, 100, step=10)
            seed = c2.number_input("Seed", 0, 1_000_000, 42)
        else:
            courses_file = rooms_file = None
            n = seed = None
        submitted = st.form_submit_button("Assign")

    if submitted:
        if mode == "Upload CSVs":
            if courses_file is None or rooms_file is None:
                st.error("Please upload both a courses and a rooms CSV.")
                st.stop()
            try:
                courses, rooms = load_inputs_cached(courses_file.getvalue(), rooms_file.getvalue())
            except ValueError as e:
                st.error(f"Could not load input: {e}")
                st.stop()
        elif mode == "Synthetic":
            courses, rooms = build_synthetic_cached(int(n), int(seed))
        else:
            courses, rooms = demo_courses(), demo_rooms()

        t0 = time.perf_counter()
        try:
            result = GreedyAssignmentSolver().solve(courses, rooms)
        except ValueError as e:
            st.error(str(e))
            st.stop()
        t1 = time.perf_counter()

        st.subheader("Summary")
        st.text(summary(courses, rooms, result))
        st.caption(f"Solve time: {(t1 - t0) * 1000:.2f} ms")

        if result.feasible:
            st.success(f"Assignment successful: {result.total_rooms_used} rooms used.")
            st.dataframe(assignment_table(courses, result), use_container_width=True)
            buf = io.StringIO()
            write_assignment(buf, courses, result)
            st.download_button("Download assignment.csv", buf.getvalue(),
                               file_name="assignment.csv", mime="text/csv")
        else:
            st.warning("No feasible assignment found.")

with tab_exp:
    with st.form("experiment"):
        c1, c2, c3 = st.columns(3)
        counts_text = c1.text_input("Course counts", "10,50,100,200,500")
        iterations = c2.number_input("Iterations per count", 1, 100, 10)
        exp_seed = c3.number_input("Seed", 0, 1_000_000, 42, key="exp_seed")
        run_exp = st.form_submit_button("Run experiments")

    if run_exp:
        try:
            counts = tuple(int(x) for x in counts_text.split(",") if x.strip())
        except ValueError:
            st.error("Course counts must be comma-separated integers.")
            st.stop()
        df = run_detailed_cached(int(iterations), counts, int(exp_seed))
        st.dataframe(df, use_container_width=True)
        st.line_chart(df.set_index("courses")[["avg_time_ms"]])
        st.bar_chart(df.set_index("courses")[["success_rate"]])
