import random
import re
from collections import defaultdict

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
TIME_SLOTS = ["09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00"]
LUNCH_BREAK = "Lunch Break"
EXPORT_FORMATS = ("pdf", "excel", "csv")

# Same assignment for every option; only the labels and scores differ.
TIMETABLE_OPTIONS = [
    {
        "id": "option-1",
        "name": "Balanced Distribution",
        "description": "Evenly distributed subjects across all days with optimal break timing and minimal teacher conflicts.",
        "efficiency": 95,
        "conflicts": 0
    },
    {
        "id": "option-2",
        "name": "Morning Intensive",
        "description": "Concentrated morning sessions with lighter afternoons, ideal for better student attention.",
        "efficiency": 88,
        "conflicts": 1
    },
    {
        "id": "option-3",
        "name": "Lab-Theory Optimized",
        "description": "Strategic placement of lab and theory sessions for maximum learning efficiency.",
        "efficiency": 92,
        "conflicts": 0
    }
]

CLASH_THRESHOLD = 0.8


def slot_time_range(start):
    hour = int(start.split(":")[0])
    return f"{start} - {hour + 1:02d}:00"


def make_lunch_slot(start):
    return {
        "time": slot_time_range(start),
        "subject": LUNCH_BREAK,
        "teacher": "",
        "room": "Cafeteria",
        "type": "lunch"
    }


def make_subject_slot(subject, index, start):
    kind = subject.get("type") or "theory"
    return {
        "time": slot_time_range(start),
        "subject": subject.get("name") or f"Subject {index + 1}",
        "teacher": subject.get("teacher") or "TBD",
        "room": f"Lab-{index + 1}" if kind == "lab" else f"Room-{index + 1}",
        "type": kind
    }


def assign_slots(subjects, lunch_start_time):
    """
    Round-robin placement: slot ``i`` of every day gets ``subjects[i % len(subjects)]``,
    except the slot starting at ``lunch_start_time``. With no subjects only the
    lunch entry is emitted.
    """
    subjects = subjects or []
    schedule = {}
    for day in DAYS:
        schedule[day] = []
        for index, start in enumerate(TIME_SLOTS):
            if start == lunch_start_time:
                schedule[day].append(make_lunch_slot(start))
            elif subjects:
                subject = subjects[index % len(subjects)]
                schedule[day].append(make_subject_slot(subject, index, start))
    return schedule


def build_timetable_options(form_data):
    subjects = form_data.get("subjects", [])
    lunch_start_time = form_data.get("lunchStartTime")
    options = []
    for template in TIMETABLE_OPTIONS:
        option = dict(template)
        option["schedule"] = assign_slots(subjects, lunch_start_time)
        options.append(option)
    return options


def calculate_schedule_stats(schedule):
    """Calculate statistics for a generated schedule"""
    stats = {
        "total_days": len(schedule),
        "total_slots": 0,
        "total_slots_used": 0,
        "lunch_slots": 0,
        "teacher_load": {},
        "room_usage": {},
        "subject_distribution": {}
    }

    teacher_hours = defaultdict(int)
    room_hours = defaultdict(int)
    subject_count = defaultdict(int)

    for day_slots in schedule.values():
        for slot in day_slots:
            stats["total_slots"] += 1
            if slot.get("type") == "lunch":
                stats["lunch_slots"] += 1
                continue
            stats["total_slots_used"] += 1
            if slot.get("teacher"):
                teacher_hours[slot["teacher"]] += 1
            if slot.get("room"):
                room_hours[slot["room"]] += 1
            subject_count[slot.get("subject")] += 1

    stats["teacher_load"] = dict(teacher_hours)
    stats["room_usage"] = dict(room_hours)
    stats["subject_distribution"] = dict(subject_count)
    return stats


def export_file_name(option_name, fmt):
    slug = re.sub(r"\s+", "_", option_name.lower())
    return f"timetable_{slug}.{fmt}"


def check_for_clashes(time_slot, current_timetable, rng=None):
    # Stub: neither argument is inspected.
    rng = rng or random
    if rng.random() > CLASH_THRESHOLD:
        return {
            "hasClash": True,
            "clashType": "teacher_conflict",
            "message": "Teacher has another class at this time"
        }
    return {"hasClash": False}
