from attendance_tracker.reports.service import AttendanceReportService, attendance_percentage
from attendance_tracker.students.model import Student


def _with_students(roster, teacher, total):
    roster.save_state(
        teacher,
        [
            Student("1", "Alice", "101", 3, 1, "alice_math_3"),
            Student("2", "Bob", "102", 2, 2, "alice_math_3"),
        ],
        total,
    )


def test_percentage_rounds_to_two_decimals():
    assert attendance_percentage(3, 4) == 75.0
    assert attendance_percentage(1, 3) == 33.33
    assert attendance_percentage(5, 0) is None


def test_summary_percentages(roster, teacher):
    _with_students(roster, teacher, 4)

    rows = AttendanceReportService().summarize(teacher)

    assert [(r.name, r.percentage) for r in rows] == [("Alice", 75.0), ("Bob", 50.0)]
    assert rows[0].as_dict()["rollNo"] == "101"


def test_csv_export(roster, teacher):
    _with_students(roster, teacher, 4)

    text = AttendanceReportService().export_csv(teacher)

    assert text.splitlines() == [
        "Name,Roll No,Attendance,Absents,Percentage",
        "Alice,101,3,1,75.00",
        "Bob,102,2,2,50.00",
    ]


def test_csv_export_without_classes_uses_na(roster, teacher):
    _with_students(roster, teacher, 0)

    lines = AttendanceReportService().export_csv(teacher).splitlines()

    assert lines[1].endswith(",N/A")
    assert AttendanceReportService().export_filename(teacher) == "alice_math_3_attendance.csv"


def test_report_lists_every_roster_student_the_workflow_counts(roster, teacher):
    roster.save_state(
        teacher,
        [
            Student("1", "Alice", "101", 3, 1, "alice_math_3"),
            Student("2", "Carol", "103", 1, 3, "someone_else_1"),
        ],
        4,
    )

    rows = AttendanceReportService().summarize(teacher)
    lines = AttendanceReportService().export_csv(teacher).splitlines()

    assert [r.name for r in rows] == [s.name for s in teacher.students]
    assert "Carol,103,1,3,25.00" in lines
