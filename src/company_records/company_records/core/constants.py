"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

EMPLOYEE_TAG = "employee"
DEPARTMENT_TAG = "department"

EMPLOYEE_FIELD_COUNT = 4
DEPARTMENT_FIELD_COUNT = 3

# Characters that would break the line format if they appeared inside a field.
RESERVED_FIELD_CHARS = (",", "(", ")", "\n", "\r")

DEFAULT_DATA_FILE = "data/empresa.txt"
FILE_ENCODING = "utf-8"
