"""Dayflow HRMS package.

Organized by feature modules (users, attendance, leave, payroll, reports)
with a thin Flask controller layer over service/repository layers.
"""
