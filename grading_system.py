"""
Student Grading System - SCRIPT WRAPPER
=======================================

Runs the interactive grading system. The code lives in the 'gradebook'
package.

USAGE:
------

Option 1 - Run as module:
    python -m gradebook

Option 2 - Run this file:
    python grading_system.py

Option 3 - Installed console script:
    gradebook

For more information, see gradebook/__init__.py
"""

from gradebook.cli import main

if __name__ == "__main__":
    main()
