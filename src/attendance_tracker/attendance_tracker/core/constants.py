"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

UNKNOWN_TEACHER_KEY = "unknown_teacher_key"

TEACHERS_KEY = "teachers"
STUDENTS_SUFFIX = "-students"
TOTAL_CLASSES_SUFFIX = "-totalClasses"

DEFAULT_MIN_PASSWORD_LENGTH = 6

CSV_HEADER = ["Name", "Roll No", "Attendance", "Absents", "Percentage"]
NOT_AVAILABLE = "N/A"
