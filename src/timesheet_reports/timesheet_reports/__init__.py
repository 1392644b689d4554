"""Timesheet report job.

This package is organized by feature modules (clients, employees, timesheets,
holidays, ...) with repository interfaces, MySQL adapters and a service layer that
renders, publishes and schedules the monthly client reports.
"""
