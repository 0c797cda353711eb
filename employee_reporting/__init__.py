"""Employee registry reporting.

Parses an employee registry CSV, validates its organisational integrity, and
reports on reporting-line depth and manager pay relative to direct reports.
"""
