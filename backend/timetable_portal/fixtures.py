"""Static demo data served by the mock API and used to seed the state store."""

DEFAULT_AVATAR = "https://images.pexels.com/photos/1239291/pexels-photo-1239291.jpeg?auto=compress&cs=tinysrgb&w=400"

MOCK_USERS = {
    "student": {
        "id": "1",
        "name": "Rahul Sharma",
        "email": "rahul.sharma@student.edu",
        "role": "student",
        "studentId": "STU2024001",
        "stream": "Computer Science",
        "year": 3,
        "semester": 5,
        "phone": "+91-9876543210",
        "avatar": DEFAULT_AVATAR
    },
    "teacher": {
        "id": "2",
        "name": "Prof. Neha Verma",
        "email": "neha.verma@college.edu",
        "role": "teacher",
        "teacherId": "TCH2024001",
        "subjects": ["Data Structures", "Algorithms", "Database Systems"],
        "department": "Computer Science",
        "avatar": "https://images.pexels.com/photos/774909/pexels-photo-774909.jpeg?auto=compress&cs=tinysrgb&w=400"
    },
    "admin": {
        "id": "3",
        "name": "Arjun Mehta",
        "email": "arjun.mehta@college.edu",
        "role": "admin",
        "adminId": "ADM2024001",
        "permissions": ["manage_timetables", "manage_faculty", "manage_students"],
        "avatar": "https://images.pexels.com/photos/1181519/pexels-photo-1181519.jpeg?auto=compress&cs=tinysrgb&w=400"
    }
}

MOCK_SUBJECTS = [
    {"id": "1", "name": "Data Structures", "code": "CS301", "credits": 3, "hoursPerWeek": 4,
     "teacher": "Prof. Neha Verma", "department": "Computer Science"},
    {"id": "2", "name": "Database Systems", "code": "CS302", "credits": 3, "hoursPerWeek": 4,
     "teacher": "Prof. Rajesh Kumar", "department": "Computer Science"},
    {"id": "3", "name": "Operating Systems", "code": "CS303", "credits": 3, "hoursPerWeek": 4,
     "teacher": "Prof. Anjali Singh", "department": "Computer Science"},
    {"id": "4", "name": "Software Engineering", "code": "CS304", "credits": 3, "hoursPerWeek": 3,
     "teacher": "Prof. Vikram Desai", "department": "Computer Science"},
    {"id": "5", "name": "Computer Networks", "code": "CS305", "credits": 3, "hoursPerWeek": 3,
     "teacher": "Prof. Priya Nair", "department": "Computer Science"},
]


def _time_slot(slot_id, day, period, start, end, subject_index=None, room=None):
    slot = {"id": slot_id, "day": day, "period": period, "startTime": start, "endTime": end}
    if subject_index is None:
        slot["isLunch"] = True
        return slot
    subject = MOCK_SUBJECTS[subject_index]
    slot.update({"subject": subject, "teacher": subject["teacher"], "room": room})
    return slot


MOCK_TIME_SLOTS = [
    _time_slot("1", "Monday", 1, "09:00", "10:00", 0, "CS-101"),
    _time_slot("2", "Monday", 2, "10:00", "11:00", 1, "CS-102"),
    _time_slot("3", "Monday", 3, "11:00", "12:00", 2, "CS-103"),
    _time_slot("4", "Monday", 4, "12:00", "13:00"),
    _time_slot("5", "Monday", 5, "13:00", "14:00", 3, "CS-104"),
    _time_slot("6", "Monday", 6, "14:00", "15:00", 4, "CS-105"),
    _time_slot("7", "Tuesday", 1, "09:00", "10:00", 1, "CS-102"),
    _time_slot("8", "Tuesday", 2, "10:00", "11:00", 0, "CS-101"),
    _time_slot("9", "Tuesday", 3, "11:00", "12:00", 3, "CS-104"),
    _time_slot("10", "Tuesday", 4, "12:00", "13:00"),
    _time_slot("11", "Tuesday", 5, "13:00", "14:00", 2, "CS-103"),
    _time_slot("12", "Tuesday", 6, "14:00", "15:00", 4, "CS-105"),
]

MOCK_TIMETABLES = [
    {
        "id": "1",
        "branch": "Computer Science",
        "semester": 5,
        "stream": "Regular",
        "periodsPerDay": 6,
        "lunchPeriod": 4,
        "timeSlots": MOCK_TIME_SLOTS,
        "createdAt": "2024-01-15",
        "lastModified": "2024-01-20"
    }
]

MOCK_FACULTY_REQUESTS = [
    {
        "id": "1",
        "teacherId": "TCH2024001",
        "teacherName": "Prof. Neha Verma",
        "requestType": "leave",
        "date": "2024-02-15",
        "reason": "Medical appointment",
        "status": "pending",
        "submittedAt": "2024-02-10",
        "affectedClasses": ["CS301 - Data Structures", "CS302 - Database Systems"]
    },
    {
        "id": "2",
        "teacherId": "TCH2024002",
        "teacherName": "Prof. Rajesh Kumar",
        "requestType": "special_class",
        "date": "2024-02-18",
        "reason": "Make-up class for missed lecture",
        "status": "approved",
        "submittedAt": "2024-02-12"
    },
    {
        "id": "3",
        "teacherId": "TCH2024003",
        "teacherName": "Prof. Anjali Singh",
        "requestType": "leave",
        "date": "2024-02-20",
        "reason": "Conference attendance",
        "status": "pending",
        "submittedAt": "2024-02-14",
        "affectedClasses": ["CS303 - Operating Systems"]
    }
]


def _weekly(pairs):
    days = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    return [{"day": day, "requests": r, "classes": c} for day, (r, c) in zip(days, pairs)]


MOCK_DASHBOARD_STATS = {
    "admin": {
        "totalStudents": 1250,
        "totalTeachers": 85,
        "totalSubjects": 120,
        "pendingRequests": 12,
        "weeklyActivity": _weekly([(5, 45), (8, 42), (3, 48), (12, 40), (7, 38), (2, 25), (1, 15)])
    },
    "teacher": {
        "totalStudents": 180,
        "totalTeachers": 1,
        "totalSubjects": 3,
        "pendingRequests": 1,
        "weeklyActivity": _weekly([(0, 6), (1, 5), (0, 7), (0, 6), (0, 4), (0, 2), (0, 0)])
    },
    "student": {
        "totalStudents": 1,
        "totalTeachers": 15,
        "totalSubjects": 8,
        "pendingRequests": 0,
        "weeklyActivity": _weekly([(0, 6), (0, 5), (0, 7), (0, 6), (0, 4), (0, 2), (0, 0)])
    }
}

MOCK_TEACHERS = [
    {"id": "1", "name": "Prof. Neha Verma", "department": "Computer Science",
     "subjects": ["Data Structures", "Algorithms"], "availability": "Available"},
    {"id": "2", "name": "Prof. Rajesh Kumar", "department": "Computer Science",
     "subjects": ["Database Systems", "Web Development"], "availability": "Busy"},
    {"id": "3", "name": "Prof. Anjali Singh", "department": "Computer Science",
     "subjects": ["Operating Systems", "System Programming"], "availability": "Available"},
    {"id": "4", "name": "Prof. Vikram Desai", "department": "Computer Science",
     "subjects": ["Software Engineering", "Project Management"], "availability": "Available"},
    {"id": "5", "name": "Prof. Priya Nair", "department": "Computer Science",
     "subjects": ["Computer Networks", "Cybersecurity"], "availability": "Office Hours"},
]

MOCK_EXAMS = [
    {"id": "1", "subject": "Data Structures", "date": "2024-03-15", "time": "09:00 AM", "duration": "3 hours", "room": "Main Hall"},
    {"id": "2", "subject": "Database Systems", "date": "2024-03-18", "time": "02:00 PM", "duration": "3 hours", "room": "CS Building"},
    {"id": "3", "subject": "Operating Systems", "date": "2024-03-20", "time": "09:00 AM", "duration": "3 hours", "room": "Main Hall"},
    {"id": "4", "subject": "Software Engineering", "date": "2024-03-22", "time": "02:00 PM", "duration": "3 hours", "room": "Lab 1"},
    {"id": "5", "subject": "Computer Networks", "date": "2024-03-25", "time": "09:00 AM", "duration": "3 hours", "room": "CS Building"},
]

MOCK_FACULTY = [
    {
        "id": "1",
        "name": "Dr. Sarah Wilson",
        "email": "sarah.wilson@college.edu",
        "phone": "+1-555-0123",
        "department": "Computer Science",
        "designation": "Professor",
        "subjects": ["Data Structures", "Algorithms", "Database Systems"],
        "experience": "12 years",
        "qualification": "Ph.D. Computer Science",
        "availability": "Available"
    },
    {
        "id": "2",
        "name": "Dr. John Smith",
        "email": "john.smith@college.edu",
        "phone": "+1-555-0124",
        "department": "Computer Science",
        "designation": "Associate Professor",
        "subjects": ["Web Development", "Software Engineering"],
        "experience": "8 years",
        "qualification": "Ph.D. Software Engineering",
        "availability": "Busy"
    },
    {
        "id": "3",
        "name": "Dr. Emily Brown",
        "email": "emily.brown@college.edu",
        "phone": "+1-555-0125",
        "department": "Information Technology",
        "designation": "Assistant Professor",
        "subjects": ["Operating Systems", "Computer Networks"],
        "experience": "5 years",
        "qualification": "Ph.D. Information Technology",
        "availability": "Available"
    }
]

DEPARTMENTS = [
    "Computer Science",
    "Information Technology",
    "Electronics & Communication",
    "Mechanical Engineering",
    "Civil Engineering",
    "Electrical Engineering"
]

# The generator form offers the same list as branches.
BRANCHES = list(DEPARTMENTS)

SEMESTERS = ["1", "2", "3", "4", "5", "6", "7", "8"]

FORM_TEACHERS = [
    "Dr. Sarah Wilson",
    "Dr. John Smith",
    "Dr. Emily Brown",
    "Dr. Michael Davis",
    "Dr. Lisa Anderson",
    "Dr. Robert Johnson",
    "Dr. Maria Garcia",
    "Dr. David Lee"
]

LUNCH_TIME_OPTIONS = [
    "08:00", "09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00", "17:00"
]

DEFAULT_NOTIFICATIONS = [
    {
        "id": "1",
        "title": "Welcome!",
        "message": "Your timetable has been successfully generated.",
        "type": "success"
    },
    {
        "id": "2",
        "title": "Reminder",
        "message": "Faculty meeting scheduled for tomorrow at 2 PM.",
        "type": "info"
    }
]

STUDENT_WEEKLY_SCHEDULE = {
    "Monday": [
        {"time": "09:00-10:00", "subject": "Data Structures", "teacher": "Dr. Sarah Wilson", "room": "CS-101"},
        {"time": "10:00-11:00", "subject": "Database Systems", "teacher": "Dr. John Smith", "room": "CS-102"},
        {"time": "11:00-12:00", "subject": "Operating Systems", "teacher": "Dr. Emily Brown", "room": "CS-103"},
        {"time": "12:00-13:00", "subject": "Lunch Break", "teacher": "", "room": "", "isBreak": True},
        {"time": "13:00-14:00", "subject": "Software Engineering", "teacher": "Dr. Michael Davis", "room": "CS-104"},
    ],
    "Tuesday": [
        {"time": "09:00-10:00", "subject": "Database Systems", "teacher": "Dr. John Smith", "room": "CS-102"},
        {"time": "10:00-11:00", "subject": "Data Structures Lab", "teacher": "Dr. Sarah Wilson", "room": "Lab-1"},
        {"time": "11:00-12:00", "subject": "Computer Networks", "teacher": "Dr. Lisa Anderson", "room": "CS-105"},
        {"time": "12:00-13:00", "subject": "Lunch Break", "teacher": "", "room": "", "isBreak": True},
        {"time": "13:00-14:00", "subject": "OS Lab", "teacher": "Dr. Emily Brown", "room": "Lab-2"},
    ],
    "Wednesday": [
        {"time": "09:00-10:00", "subject": "Software Engineering", "teacher": "Dr. Michael Davis", "room": "CS-104"},
        {"time": "10:00-11:00", "subject": "Data Structures", "teacher": "Dr. Sarah Wilson", "room": "CS-101"},
        {"time": "11:00-12:00", "subject": "Database Systems", "teacher": "Dr. John Smith", "room": "CS-102"},
        {"time": "12:00-13:00", "subject": "Lunch Break", "teacher": "", "room": "", "isBreak": True},
        {"time": "13:00-14:00", "subject": "Computer Networks", "teacher": "Dr. Lisa Anderson", "room": "CS-105"},
    ],
    "Thursday": [
        {"time": "09:00-10:00", "subject": "Operating Systems", "teacher": "Dr. Emily Brown", "room": "CS-103"},
        {"time": "10:00-11:00", "subject": "Software Engineering", "teacher": "Dr. Michael Davis", "room": "CS-104"},
        {"time": "11:00-12:00", "subject": "Database Lab", "teacher": "Dr. John Smith", "room": "Lab-3"},
        {"time": "12:00-13:00", "subject": "Lunch Break", "teacher": "", "room": "", "isBreak": True},
        {"time": "13:00-14:00", "subject": "Computer Networks Lab", "teacher": "Dr. Lisa Anderson", "room": "Lab-4"},
    ],
    "Friday": [
        {"time": "09:00-10:00", "subject": "Data Structures", "teacher": "Dr. Sarah Wilson", "room": "CS-101"},
        {"time": "10:00-11:00", "subject": "Operating Systems", "teacher": "Dr. Emily Brown", "room": "CS-103"},
        {"time": "11:00-12:00", "subject": "Software Engineering Project", "teacher": "Dr. Michael Davis", "room": "CS-104"},
        {"time": "12:00-13:00", "subject": "Lunch Break", "teacher": "", "room": "", "isBreak": True},
    ],
}

TEACHER_TODAY_SCHEDULE = [
    {"time": "09:00 - 10:00", "subject": "Data Structures", "room": "CS-101", "students": 45},
    {"time": "10:00 - 11:00", "subject": "Database Systems", "room": "CS-102", "students": 38},
    {"time": "11:00 - 12:00", "subject": "Break", "room": "", "students": 0, "isBreak": True},
    {"time": "12:00 - 13:00", "subject": "Data Structures Lab", "room": "Lab-1", "students": 25},
    {"time": "14:00 - 15:00", "subject": "Database Systems", "room": "CS-102", "students": 40},
]

TEACHER_WORKLOAD = [
    {"name": "Data Structures", "value": 40},
    {"name": "Database Systems", "value": 35},
    {"name": "Research", "value": 15},
    {"name": "Admin Work", "value": 10},
]

ADMIN_QUICK_ACTIONS = [
    {"title": "Generate Timetable", "href": "/admin/timetable/generate"},
    {"title": "View Timetables", "href": "/admin/timetable/view"},
    {"title": "Manage Faculty", "href": "/admin/faculty"},
    {"title": "Faculty Requests", "href": "/admin/requests"},
]

ANALYTICS = {
    "weekly": [
        {"name": "Mon", "students": 1200, "teachers": 82, "classes": 145, "requests": 5},
        {"name": "Tue", "students": 1180, "teachers": 85, "classes": 142, "requests": 8},
        {"name": "Wed", "students": 1220, "teachers": 83, "classes": 148, "requests": 3},
        {"name": "Thu", "students": 1190, "teachers": 84, "classes": 140, "requests": 12},
        {"name": "Fri", "students": 1160, "teachers": 81, "classes": 138, "requests": 7},
        {"name": "Sat", "students": 980, "teachers": 65, "classes": 95, "requests": 2},
    ],
    "departments": [
        {"name": "Computer Science", "students": 450},
        {"name": "Information Technology", "students": 380},
        {"name": "Electronics", "students": 320},
        {"name": "Mechanical", "students": 290},
        {"name": "Civil", "students": 260},
        {"name": "Electrical", "students": 240},
    ],
    "timetableEfficiency": [
        {"semester": "Sem 1", "efficiency": 92, "conflicts": 2},
        {"semester": "Sem 2", "efficiency": 88, "conflicts": 5},
        {"semester": "Sem 3", "efficiency": 95, "conflicts": 1},
        {"semester": "Sem 4", "efficiency": 90, "conflicts": 3},
        {"semester": "Sem 5", "efficiency": 93, "conflicts": 2},
        {"semester": "Sem 6", "efficiency": 87, "conflicts": 6},
        {"semester": "Sem 7", "efficiency": 91, "conflicts": 4},
        {"semester": "Sem 8", "efficiency": 89, "conflicts": 3},
    ],
    "monthlyTrends": [
        {"month": "Jan", "newStudents": 45, "facultyRequests": 12, "timetableChanges": 8},
        {"month": "Feb", "newStudents": 38, "facultyRequests": 18, "timetableChanges": 15},
        {"month": "Mar", "newStudents": 52, "facultyRequests": 22, "timetableChanges": 12},
        {"month": "Apr", "newStudents": 61, "facultyRequests": 15, "timetableChanges": 9},
        {"month": "May", "newStudents": 35, "facultyRequests": 8, "timetableChanges": 5},
        {"month": "Jun", "newStudents": 48, "facultyRequests": 25, "timetableChanges": 18},
    ]
}
