"""Tests for timetable option generation, schedule statistics and clash checks."""

import random

import pytest

from timetable_portal.generator import (
    DAYS,
    LUNCH_BREAK,
    TIME_SLOTS,
    assign_slots,
    build_timetable_options,
    calculate_schedule_stats,
    check_for_clashes,
    export_file_name,
    slot_time_range,
)


SUBJECTS = [
    {"name": "Data Structures", "teacher": "Dr. Sarah Wilson", "hoursPerWeek": 4, "type": "theory"},
    {"name": "DBMS Lab", "teacher": "Dr. John Smith", "hoursPerWeek": 2, "type": "lab"},
    {"name": "Networks", "teacher": "Dr. Emily Brown", "hoursPerWeek": 3, "type": "theory"},
]


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


# ─── SLOT ASSIGNMENT ──────────────────────────────────────────────────────────

class TestAssignSlots:
    def test_every_weekday_present(self):
        schedule = assign_slots(SUBJECTS, "12:00")
        assert list(schedule.keys()) == DAYS

    def test_lunch_slot_replaces_subject(self):
        """The slot starting at the lunch time becomes the lunch break."""
        schedule = assign_slots(SUBJECTS, "12:00")
        lunch = schedule["Monday"][3]
        assert lunch["subject"] == LUNCH_BREAK
        assert lunch["type"] == "lunch"
        assert lunch["room"] == "Cafeteria"
        assert lunch["teacher"] == ""
        assert lunch["time"] == "12:00 - 13:00"

    def test_round_robin_uses_slot_index(self):
        schedule = assign_slots(SUBJECTS, "12:00")
        monday = schedule["Monday"]
        assert monday[0]["subject"] == "Data Structures"
        assert monday[1]["subject"] == "DBMS Lab"
        assert monday[2]["subject"] == "Networks"
        # index 4 -> subjects[4 % 3]
        assert monday[4]["subject"] == "DBMS Lab"
        assert monday[4]["room"] == "Lab-5"

    def test_rooms_follow_subject_type(self):
        monday = assign_slots(SUBJECTS, "12:00")["Monday"]
        assert monday[0]["room"] == "Room-1"
        assert monday[1]["room"] == "Lab-2"

    def test_days_are_identical(self):
        schedule = assign_slots(SUBJECTS, "12:00")
        assert all(schedule[day] == schedule["Monday"] for day in DAYS)

    def test_missing_fields_fall_back(self):
        monday = assign_slots([{}], "12:00")["Monday"]
        assert monday[0]["subject"] == "Subject 1"
        assert monday[0]["teacher"] == "TBD"
        assert monday[0]["type"] == "theory"

    def test_no_subjects_only_lunch(self):
        schedule = assign_slots([], "13:00")
        assert schedule["Friday"] == [
            {"time": "13:00 - 14:00", "subject": LUNCH_BREAK, "teacher": "", "room": "Cafeteria", "type": "lunch"}
        ]

    def test_unmatched_lunch_time_fills_all_slots(self):
        monday = assign_slots(SUBJECTS, "08:00")["Monday"]
        assert len(monday) == len(TIME_SLOTS)
        assert all(slot["type"] != "lunch" for slot in monday)


class TestTimetableOptions:
    def test_three_options_in_order(self):
        options = build_timetable_options({"subjects": SUBJECTS, "lunchStartTime": "12:00"})
        assert [o["id"] for o in options] == ["option-1", "option-2", "option-3"]
        assert [o["efficiency"] for o in options] == [95, 88, 92]
        assert [o["conflicts"] for o in options] == [0, 1, 0]

    def test_options_share_schedule(self):
        options = build_timetable_options({"subjects": SUBJECTS, "lunchStartTime": "12:00"})
        assert options[0]["schedule"] == options[1]["schedule"] == options[2]["schedule"]

    def test_slot_time_range_pads_hour(self):
        assert slot_time_range("09:00") == "09:00 - 10:00"
        assert slot_time_range("16:00") == "16:00 - 17:00"


# ─── STATISTICS & EXPORT ──────────────────────────────────────────────────────

class TestScheduleStats:
    def test_counts(self):
        stats = calculate_schedule_stats(assign_slots(SUBJECTS, "12:00"))
        assert stats["total_days"] == 5
        assert stats["total_slots"] == 40
        assert stats["lunch_slots"] == 5
        assert stats["total_slots_used"] == 35

    def test_teacher_load_sums_to_used_slots(self):
        stats = calculate_schedule_stats(assign_slots(SUBJECTS, "12:00"))
        assert sum(stats["teacher_load"].values()) == stats["total_slots_used"]
        assert "Cafeteria" not in stats["room_usage"]


class TestExportFileName:
    @pytest.mark.parametrize("name,fmt,expected", [
        ("Balanced Distribution", "pdf", "timetable_balanced_distribution.pdf"),
        ("Lab-Theory Optimized", "csv", "timetable_lab-theory_optimized.csv"),
        ("Morning  Intensive", "excel", "timetable_morning_intensive.excel"),
    ])
    def test_slug(self, name, fmt, expected):
        assert export_file_name(name, fmt) == expected


class TestClashCheck:
    def test_clash_above_threshold(self):
        result = check_for_clashes({}, {}, rng=FixedRandom(0.95))
        assert result == {
            "hasClash": True,
            "clashType": "teacher_conflict",
            "message": "Teacher has another class at this time",
        }

    def test_threshold_itself_is_no_clash(self):
        assert check_for_clashes({}, {}, rng=FixedRandom(0.8)) == {"hasClash": False}

    def test_default_rng_shape(self):
        random.seed(1)
        result = check_for_clashes(None, None)
        assert set(result) in ({"hasClash"}, {"hasClash", "clashType", "message"})
