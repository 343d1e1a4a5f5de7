"""
Calorie Ledger - Weekly calorie logging utility.

Records calorie intake per day of a fixed seven-day week, reports weekly
totals and a monthly estimate, and keeps entries in a plain text file
between sessions.
"""

__version__ = "0.1.0"
