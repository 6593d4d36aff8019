"""Classroom attendance tracker.

Feature modules (teachers, students, classes, reports) each carry their own
model/repository/service layers; Flask controllers stay thin and only
translate HTTP requests into service calls.
"""
