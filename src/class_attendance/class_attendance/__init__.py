"""Class Attendance package.

Organized by feature modules (attendance, roster) with a thin Flask controller
layer on top of a view controller that talks to the attendance REST API.
"""
