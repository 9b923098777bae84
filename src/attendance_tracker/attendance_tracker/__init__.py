"""Attendance Tracker package.

Organized by feature modules (attendance, subjects) with a thin Flask
controller layer on top of service/repository layers.
"""
