"""School Hours Tracker package.

This package is organized by feature modules (employees, schools, work_entries,
reports, ...) around an in-memory record store, with thin repository gateways
for persistence and service classes holding the business rules.
"""
