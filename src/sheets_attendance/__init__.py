"""Sheets Attendance package.

Attendance and leave workflow over a shared spreadsheet, organized by feature
modules (employees, confirmations, attendance, leaves, reports) with a thin
Flask controller layer on top of service/repository layers.
"""
