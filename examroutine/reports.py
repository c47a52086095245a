from typing import List

from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch
from reportlab.lib import colors
from reportlab.lib.utils import simpleSplit

from .models import RoutineEntry
from .scheduling.routine import routine_by_date

PAGE_W, PAGE_H = A4
TOP = PAGE_H - 1.3 * inch
BOTTOM = 1 * inch
ROLL_WIDTH = PAGE_W - 2.4 * inch


def _canvas_header(c: canvas.Canvas, title: str):
    c.setFont("Helvetica-Bold", 14)
    c.drawString(1 * inch, PAGE_H - 0.9 * inch, title)
    c.setStrokeColor(colors.black)
    c.line(1 * inch, PAGE_H - 1.0 * inch, PAGE_W - 1 * inch, PAGE_H - 1.0 * inch)


def export_routine_pdf(path: str, entries: List[RoutineEntry], title: str = "Backlog Exam Routine"):
    """Printable routine: one block per exam date listing its courses."""
    c = canvas.Canvas(path, pagesize=A4)
    _canvas_header(c, title)
    y = TOP

    def next_line(step: float):
        nonlocal y
        y -= step
        if y < BOTTOM:
            c.showPage()
            _canvas_header(c, f"{title} (cont.)")
            y = TOP

    for exam_date, day_entries in routine_by_date(entries).items():
        c.setFont("Helvetica-Bold", 11)
        c.drawString(1 * inch, y, exam_date.strftime("%A, %d %B %Y"))
        next_line(0.25 * inch)
        for e in day_entries:
            c.setFont("Helvetica", 10)
            label = e.course_code if not e.course_name else f"{e.course_code}  {e.course_name}"
            c.drawString(1.2 * inch, y, label)
            next_line(0.2 * inch)
            if e.roll_numbers:
                for chunk in simpleSplit(f"Roll: {e.roll_numbers}", "Helvetica", 8, ROLL_WIDTH):
                    c.setFont("Helvetica", 8)
                    c.drawString(1.4 * inch, y, chunk)
                    next_line(0.15 * inch)
                next_line(0.05 * inch)
        next_line(0.1 * inch)

    c.save()
