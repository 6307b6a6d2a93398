"""
Configuration constants for the grading system.

This module contains all configuration values and constants used throughout
the grading system. Centralizing these makes it easy to adjust prompts,
file locations and grading policy in one place.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Both files live in the directory the program is started from.
RESULTS_FILE = Path("results.txt")
LOG_FILE = Path("app.log")

FILE_ENCODING = "utf-8"


# =============================================================================
# COMMAND TOKENS
# =============================================================================

# Typed at any prompt to abandon the current entry form
CMD_CANCEL = "cancel"

# Typed as a first name / course name to close the entry loop
CMD_END = "end"

# Accepted confirmation answers (English and Turkish)
YES_ANSWERS = {"y", "yes", "e", "evet"}
NO_ANSWERS = {"n", "no", "h", "hayır"}


# =============================================================================
# PROMPT MESSAGES
# =============================================================================

MSG_ENTER_DEPT = "Enter department information"
MSG_ENTER_STUDENT = "Enter student information"
MSG_ENTER_COURSE = "Enter course information"
MSG_CANCEL_HINT = "(Type 'cancel' at any time to reset this section)"
MSG_CONFIRM = ">> Is the information above correct? (y/n): "
MSG_CANCELLED = ">> Entry cancelled by user."
MSG_RETRY = ">> Reloading entry form..."
MSG_DEPT_MANDATORY = ">> Department entry is mandatory. Resetting form..."


# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERR_EMPTY = ">> ERROR: This field cannot be empty. Please try again."
ERR_INVALID_NAME = ">> ERROR: Name contains invalid characters. Use letters only."
ERR_INVALID_TEXT = ">> ERROR: Invalid character! Please use only letters, numbers, and spaces."
ERR_INVALID_ID = ">> ERROR: Student ID may only contain letters and digits."
ERR_INVALID_WEB = ">> ERROR: Invalid web address format! Use e.g. 'www.duzce.edu.tr' or 'site.com'."
ERR_INVALID_NUMBER = ">> ERROR: Invalid input! Please enter a numeric value."
ERR_NOT_POSITIVE = ">> ERROR: Value must be greater than zero."
ERR_DATE_FMT = ">> ERROR: Invalid date format! Expected: 'dd.MM.yyyy' (e.g., 25.09.2000)."
ERR_FUTURE_DATE = ">> ERROR: Date cannot be in the future."
ERR_INVALID_GRADE = ">> ERROR: Invalid grade code. Please use the table (AA-FF)."
ERR_INVALID_ANSWER = ">> ERROR: Please answer 'y' or 'n'."


# =============================================================================
# INPUT FORMATS
# =============================================================================

# Letters (including Turkish letters) and spaces
NAME_PATTERN = r"[a-zA-ZğüşıöçĞÜŞİÖÇ ]+"

# Letters, digits and spaces; rejects +, -, *, ? and other symbols
SAFE_TEXT_PATTERN = r"[a-zA-Z0-9ğüşıöçĞÜŞİÖÇ ]+"

STUDENT_ID_PATTERN = r"[a-zA-Z0-9]+"

# Optional scheme, optional www., a domain label, one or two extensions.
# Valid: duzce.edu.tr, www.google.com, http://site.net
WEB_PAGE_PATTERN = r"^(https?://)?(www\.)?[\w-]+\.[a-z]{2,}(\.[a-z]{2,})?$"

DATE_INPUT_FORMATS = ("%d.%m.%Y", "%d/%m/%Y", "%d-%m-%Y")
DATE_DISPLAY_FORMAT = "%d.%m.%Y"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Letter grade -> grade points. Decoding is case-insensitive; any other
# code is rejected at the prompt.
LETTER_GRADES = {
    "AA": 4.00,
    "BA": 3.50,
    "BB": 3.25,
    "CB": 3.00,
    "CC": 2.50,
    "DC": 2.25,
    "DD": 2.00,
    "FD": 1.50,
    "FF": 0.00,
}


# =============================================================================
# REPORT SETTINGS
# =============================================================================

# GPA histogram buckets, checked top-down. Anything below the last
# threshold falls into the "fail" bucket.
HISTOGRAM_BUCKETS = (
    ("high", "3.50+ [High]", 3.50),
    ("good", "3.00+ [Good]", 3.00),
    ("mid", "2.00+ [Mid] ", 2.00),
)
HISTOGRAM_FAIL_LABEL = "<2.00 [Fail]"

REPORT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Placeholder course used to carry a restored student's GPA
HISTORY_COURSE_NAME = "Historical Record"
HISTORY_COURSE_CODE = "PREV"
