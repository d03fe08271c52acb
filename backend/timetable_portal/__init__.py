"""Timetable management portal API: role dashboards, faculty requests and timetable generation."""
