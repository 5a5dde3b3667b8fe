"""
employee-schedule: per-day working schedules of employees, weekends and holidays excluded.
"""

__version__ = "0.1.0"
