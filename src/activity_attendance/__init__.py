"""Activity attendance package.

Organized by feature modules (schedules, sessions, attendance, reports, ...).
The calendar and reconciliation layers are pure functions over in-memory values;
storage and rendering stay behind repository protocols and the export layer.
"""
