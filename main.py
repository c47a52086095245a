import argparse
import logging
from datetime import datetime

from examroutine.graph_build import build_conflict_graph
from examroutine.io_utils import (
    load_registrations, load_exam_dates, save_schedule_csv, save_schedule_json, save_routine_csv
)
from examroutine.reports import export_routine_pdf
from examroutine.scheduling.assign_days import generate_exam_schedule, ALGOS, DEFAULT_ALGO, DEFAULT_TIE_BREAK
from examroutine.scheduling.evaluation import summary
from examroutine.scheduling.routine import registered_only, default_exam_dates, build_routine
from examroutine.algorithms.greedy import TIE_BREAKS


def main():
    p = argparse.ArgumentParser(description="Backlog exam routine generator (graph colouring)")
    # Input modes
    p.add_argument('--registrations', type=str, help='CSV student_id,course_id,course_code[,course_name,roll_number,is_registered]')
    p.add_argument('--generate', type=int, default=None, help='Generate a synthetic backlog group with N students')
    p.add_argument('--courses', type=int, default=25, help='Courses in the synthetic group')
    p.add_argument('--seed', type=int, default=42)
    p.add_argument('--include_unregistered', action='store_true', help='Schedule rows with is_registered=false too')

    # Algo
    p.add_argument('--algo', type=str, default=DEFAULT_ALGO, choices=ALGOS)
    p.add_argument('--tie_break', type=str, default=DEFAULT_TIE_BREAK, choices=TIE_BREAKS,
                   help='Order of equal-degree courses: input order or course code')

    # Dates
    p.add_argument('--dates', type=str, help='CSV day_index,date with one date per exam day')
    p.add_argument('--start_date', type=str, help='Exams run on consecutive days after this date (YYYY-MM-DD)')

    # Output
    p.add_argument('--out_schedule', type=str, default='schedule.csv')
    p.add_argument('--out_json', type=str, default=None)
    p.add_argument('--out_routine', type=str, default='routine.csv')
    p.add_argument('--out_pdf', type=str, default=None)
    p.add_argument('--title', type=str, default='Backlog Exam Routine')
    p.add_argument('-v', '--verbose', action='store_true')
    args = p.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.registrations:
        try:
            registrations = load_registrations(args.registrations)
        except ValueError as e:
            raise SystemExit(str(e))
    elif args.generate is not None:
        from format_data import generate_backlog_group, registrations_from_frame
        df = generate_backlog_group(args.generate, args.courses, seed=args.seed)
        registrations = registrations_from_frame(df)
    else:
        raise SystemExit("Provide --registrations or --generate N")

    if not args.include_unregistered:
        registrations = registered_only(registrations)

    try:
        schedule = generate_exam_schedule(registrations, tie_break=args.tie_break, algo=args.algo)
        G = build_conflict_graph(registrations)
        print(summary(G, schedule))
        for day, courses in schedule.exam_days.items():
            print(f"Day {day + 1}: {', '.join(c.course_code for c in courses)}")

        save_schedule_csv(args.out_schedule, schedule)
        saved = [args.out_schedule]
        if args.out_json:
            save_schedule_json(args.out_json, schedule)
            saved.append(args.out_json)

        if args.dates:
            exam_dates = load_exam_dates(args.dates)
        else:
            start = datetime.strptime(args.start_date, "%Y-%m-%d").date() if args.start_date else None
            exam_dates = default_exam_dates(schedule.num_days, start=start)
        entries = build_routine(schedule, exam_dates, registrations)
    except ValueError as e:
        raise SystemExit(str(e))

    save_routine_csv(args.out_routine, entries)
    saved.append(args.out_routine)
    if args.out_pdf:
        export_routine_pdf(args.out_pdf, entries, title=args.title)
        saved.append(args.out_pdf)
    print(f"Saved: {', '.join(saved)}")


if __name__ == '__main__':
    main()
