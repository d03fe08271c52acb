import copy
import logging
from datetime import datetime
from functools import wraps

from flask import Flask, request, jsonify, session
from flask_cors import CORS

from timetable_portal import config, fixtures, generator, mock_api, notifications, state, storage
from timetable_portal.schemas import (
    ExportForm,
    FacultyForm,
    FacultyRequestForm,
    ForgotPasswordForm,
    LoginForm,
    PreferencesForm,
    ProfileForm,
    ResetPasswordForm,
    ResolveRequestForm,
    RoleSelectionForm,
    StudentRegisterForm,
    SubjectForm,
    TeacherRegisterForm,
    TimetableGenerateForm,
    VerifyCodeForm,
    form_to_payload,
    validate_form,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY
app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="None" if config.RUNNING_ON_RENDER else "Lax",
    SESSION_COOKIE_SECURE=config.RUNNING_ON_RENDER,
)
CORS(
    app,
    supports_credentials=True,
    origins=config.ALLOWED_ORIGINS
)

DASHBOARD_PATHS = {
    "admin": "/admin/dashboard",
    "teacher": "/teacher/dashboard",
    "student": "/student/dashboard"
}

REGISTER_SCHEMAS = {
    "student": StudentRegisterForm,
    "teacher": TeacherRegisterForm
}

ANALYTICS_METRICS = ("all", "weekly", "departments", "timetableEfficiency", "monthlyTrends")


# ----------------- Session Helpers -----------------


def get_current_user():
    user_id = session.get("user_id")
    if not user_id:
        return None
    return state.get_latest_users().get(user_id)


def public_user(user):
    if not user:
        return None
    return copy.deepcopy(user)


def require_auth(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        user = get_current_user()
        if not user:
            return jsonify({"error": "Authentication required"}), 401
        return func(*args, **kwargs)
    return wrapper


def require_roles(*roles):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            user = get_current_user()
            if not user:
                return jsonify({"error": "Authentication required"}), 401
            if user.get("role") not in roles:
                return jsonify({"error": "Forbidden"}), 403
            return func(*args, **kwargs)
        return wrapper
    return decorator


def notify(title, message, notice_type="info"):
    """Post to the feed of the signed-in user."""
    return notifications.add_notification(session["user_id"], title, message, notice_type)


def user_id_for_teacher(teacher_id):
    for user in state.get_latest_users().values():
        if user.get("teacherId") == teacher_id or user.get("id") == teacher_id:
            return user["id"]
    return None


def request_payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def validation_error_response(errors, message="Invalid input data"):
    return jsonify({"error": message, "validation_errors": errors}), 400


# ----------------- Filtering Helpers -----------------


def contains(value, query):
    return query.lower() in (value or "").lower()


def filter_requests(requests, query="", status="all"):
    filtered = []
    for req in requests:
        matches_search = not query or contains(req.get("teacherName"), query) or contains(req.get("reason"), query)
        matches_status = status == "all" or req.get("status") == status
        if matches_search and matches_status:
            filtered.append(req)
    return filtered


def request_stats(requests):
    return {
        "total": len(requests),
        "pending": len([r for r in requests if r.get("status") == "pending"]),
        "approved": len([r for r in requests if r.get("status") == "approved"]),
        "rejected": len([r for r in requests if r.get("status") == "rejected"])
    }


def filter_subjects(subjects, query="", department="all"):
    return [
        s for s in subjects
        if (not query or contains(s.get("name"), query) or contains(s.get("code"), query) or contains(s.get("teacher"), query))
        and (department == "all" or s.get("department") == department)
    ]


def filter_faculty(faculty, query="", department="all"):
    return [
        f for f in faculty
        if (not query or contains(f.get("name"), query) or contains(f.get("email"), query)
            or any(contains(sub, query) for sub in f.get("subjects", [])))
        and (department == "all" or f.get("department") == department)
    ]


def count_by(items, key, labels):
    return {label: len([item for item in items if item.get(key) == label]) for label in labels}


def teacher_requests_for(user):
    teacher_id = user.get("teacherId") or user.get("id")
    own = [r for r in mock_api.get_faculty_requests() if r.get("teacherId") == teacher_id]
    return sorted(own, key=lambda r: r.get("submittedAt", ""), reverse=True)


# ----------------- Auth Endpoints -----------------


@app.route('/auth/login', methods=['POST'])
def auth_login():
    try:
        form, errors = validate_form(LoginForm, request_payload())
        if errors:
            return validation_error_response(errors)

        try:
            user = mock_api.login(form.email, form.password, form.role)
        except mock_api.InvalidCredentials:
            return jsonify({
                "error": f"Invalid credentials. Use password: {config.DEMO_PASSWORD} for demo accounts."
            }), 401

        session["user_id"] = user["id"]
        return jsonify({"success": True, "user": public_user(user), "redirect": DASHBOARD_PATHS[user["role"]]})
    except Exception as e:
        logger.exception("Login failed")
        return jsonify({"error": f"Login failed: {str(e)}"}), 500


@app.route('/auth/logout', methods=['POST'])
@require_auth
def auth_logout():
    session.pop("user_id", None)
    return jsonify({"success": True})


@app.route('/auth/me', methods=['GET'])
def auth_me():
    user = get_current_user()
    if not user:
        return jsonify({"authenticated": False}), 200
    return jsonify({"authenticated": True, "user": public_user(user)}), 200


@app.route('/auth/register', methods=['POST'])
def auth_register():
    try:
        payload = request_payload()
        role_form, errors = validate_form(
            RoleSelectionForm, {"role": payload.get("role") or request.args.get("role") or "student"}
        )
        if errors:
            return validation_error_response(errors)
        role = role_form.role.strip().lower()

        user_data = payload
        schema = REGISTER_SCHEMAS.get(role)
        if schema is not None:
            form, errors = validate_form(schema, payload)
            if errors:
                return validation_error_response(errors)
            user_data = form_to_payload(form)

        try:
            user = mock_api.register(user_data, role)
        except mock_api.RegistrationBlocked as e:
            return jsonify({"error": str(e), "redirect": e.redirect_to}), 403
        except mock_api.EmailAlreadyRegistered as e:
            return jsonify({"error": str(e)}), 409
        except mock_api.MockApiError as e:
            return jsonify({"error": str(e)}), 400

        session["user_id"] = user["id"]
        return jsonify({"success": True, "user": public_user(user), "redirect": DASHBOARD_PATHS[role]}), 201
    except Exception as e:
        logger.exception("Registration failed")
        return jsonify({"error": "Registration failed. Please try again."}), 500


@app.route('/auth/forgot-password', methods=['POST'])
def auth_forgot_password():
    form, errors = validate_form(ForgotPasswordForm, request_payload())
    if errors:
        return validation_error_response(errors)
    mock_api.simulate_latency(1500)
    session["reset_email"] = form.email
    session.pop("reset_verified", None)
    return jsonify({"success": True, "step": "verify", "email": form.email})


@app.route('/auth/forgot-password/verify', methods=['POST'])
def auth_forgot_password_verify():
    if not session.get("reset_email"):
        return jsonify({"error": "Start the password reset first"}), 400
    form, errors = validate_form(VerifyCodeForm, request_payload())
    if errors:
        return validation_error_response(errors)
    mock_api.simulate_latency(1000)
    session["reset_verified"] = True
    return jsonify({"success": True, "step": "reset"})


@app.route('/auth/forgot-password/reset', methods=['POST'])
def auth_forgot_password_reset():
    if not session.get("reset_verified"):
        return jsonify({"error": "Verify the security code first"}), 400
    form, errors = validate_form(ResetPasswordForm, request_payload())
    if errors:
        return validation_error_response(errors)
    mock_api.simulate_latency(1500)
    email = session.pop("reset_email", None)
    session.pop("reset_verified", None)
    return jsonify({"success": True, "step": "success", "email": email})


@app.route('/options', methods=['GET'])
def form_options_api():
    return jsonify({
        "branches": fixtures.BRANCHES,
        "semesters": fixtures.SEMESTERS,
        "departments": fixtures.DEPARTMENTS,
        "teachers": fixtures.FORM_TEACHERS,
        "lunchTimes": fixtures.LUNCH_TIME_OPTIONS,
        "subjectTypes": ["theory", "lab", "tutorial"],
        "requestTypes": ["leave", "special_class"]
    })


# ----------------- Dashboards -----------------


@app.route('/student/dashboard', methods=['GET'])
@require_roles('student')
def student_dashboard_api():
    try:
        day = request.args.get("day") or datetime.utcnow().strftime("%A")
        return jsonify({
            "user": public_user(get_current_user()),
            "stats": mock_api.get_dashboard_stats("student"),
            "weeklySchedule": fixtures.STUDENT_WEEKLY_SCHEDULE,
            "day": day,
            "todayClasses": fixtures.STUDENT_WEEKLY_SCHEDULE.get(day, []),
            "exams": mock_api.get_exams()
        })
    except Exception as e:
        logger.exception("Student dashboard failed")
        return jsonify({"error": f"Unable to load dashboard: {str(e)}"}), 500


@app.route('/teacher/dashboard', methods=['GET'])
@require_roles('teacher')
def teacher_dashboard_api():
    try:
        user = get_current_user()
        return jsonify({
            "user": public_user(user),
            "stats": mock_api.get_dashboard_stats("teacher"),
            "todaySchedule": fixtures.TEACHER_TODAY_SCHEDULE,
            "workload": fixtures.TEACHER_WORKLOAD,
            "requests": teacher_requests_for(user)
        })
    except Exception as e:
        logger.exception("Teacher dashboard failed")
        return jsonify({"error": f"Unable to load dashboard: {str(e)}"}), 500


@app.route('/admin/dashboard', methods=['GET'])
@require_roles('admin')
def admin_dashboard_api():
    try:
        pending = [r for r in mock_api.get_faculty_requests() if r.get("status") == "pending"]
        return jsonify({
            "user": public_user(get_current_user()),
            "stats": mock_api.get_dashboard_stats("admin"),
            "quickActions": fixtures.ADMIN_QUICK_ACTIONS,
            "pendingRequests": pending
        })
    except Exception as e:
        logger.exception("Admin dashboard failed")
        return jsonify({"error": f"Unable to load dashboard: {str(e)}"}), 500


# ----------------- Faculty Requests -----------------


@app.route('/teacher/requests', methods=['GET'])
@require_roles('teacher')
def teacher_requests_api():
    return jsonify({"requests": teacher_requests_for(get_current_user())})


@app.route('/teacher/requests', methods=['POST'])
@require_roles('teacher')
def teacher_submit_request_api():
    try:
        form, errors = validate_form(FacultyRequestForm, request_payload())
        if errors:
            return validation_error_response(errors)

        user = get_current_user()
        payload = {
            "teacherId": user.get("teacherId") or user.get("id"),
            "teacherName": user.get("name")
        }
        payload.update(form_to_payload(form))
        new_request = mock_api.submit_faculty_request(payload)
        notify(
            "Request Submitted",
            "Your request has been submitted successfully and is pending approval.",
            "success"
        )
        return jsonify({"success": True, "request": new_request}), 201
    except Exception as e:
        logger.exception("Request submission failed")
        notify("Error", "Failed to submit request. Please try again.", "error")
        return jsonify({"error": f"Request submission failed: {str(e)}"}), 500


@app.route('/admin/requests', methods=['GET'])
@require_roles('admin')
def admin_requests_api():
    requests = mock_api.get_faculty_requests()
    query = (request.args.get("q") or "").strip()
    status = (request.args.get("status") or "all").strip().lower()
    if status != "all" and status not in mock_api.REQUEST_STATUSES:
        return jsonify({"error": "status must be all, pending, approved or rejected"}), 400
    return jsonify({
        "requests": filter_requests(requests, query, status),
        "stats": request_stats(requests)
    })


def resolve_request(request_id, status):
    try:
        form, errors = validate_form(ResolveRequestForm, request_payload())
        if errors:
            return validation_error_response(errors)
        note = (form.admin_note or "").strip() or None
        try:
            resolved = mock_api.resolve_faculty_request(request_id, status, session.get("user_id"), note)
        except mock_api.RequestNotFound as e:
            return jsonify({"error": str(e)}), 404
        except mock_api.RequestAlreadyResolved as e:
            return jsonify({"error": str(e)}), 400

        if status == "approved":
            notify(
                "Request Approved", "Faculty request has been approved successfully.", "success"
            )
        else:
            notify("Request Rejected", "Faculty request has been rejected.", "info")

        teacher_user_id = user_id_for_teacher(resolved.get("teacherId"))
        if teacher_user_id and teacher_user_id != session.get("user_id"):
            notifications.add_notification(
                teacher_user_id,
                f"Request {status.capitalize()}",
                f"Your {resolved.get('requestType', 'faculty').replace('_', ' ')} request for "
                f"{resolved.get('date')} has been {status}.",
                "success" if status == "approved" else "warning"
            )
        logger.info("Faculty request %s %s by %s", request_id, status, session.get("user_id"))
        return jsonify({"success": True, "request": resolved})
    except Exception as e:
        logger.exception("Resolving request %s failed", request_id)
        return jsonify({"error": f"Update failed: {str(e)}"}), 500


@app.route('/admin/requests/<request_id>/approve', methods=['POST'])
@require_roles('admin')
def admin_approve_request_api(request_id):
    return resolve_request(request_id, "approved")


@app.route('/admin/requests/<request_id>/reject', methods=['POST'])
@require_roles('admin')
def admin_reject_request_api(request_id):
    return resolve_request(request_id, "rejected")


# ----------------- Subjects & Faculty -----------------


@app.route('/admin/subjects', methods=['GET'])
@require_roles('admin')
def admin_subjects_api():
    subjects = mock_api.get_subjects()
    query = (request.args.get("q") or "").strip()
    department = request.args.get("department") or "all"
    return jsonify({
        "subjects": filter_subjects(subjects, query, department),
        "teachers": mock_api.get_teachers(),
        "byDepartment": count_by(subjects, "department", fixtures.DEPARTMENTS)
    })


@app.route('/admin/subjects', methods=['POST'])
@require_roles('admin')
def admin_create_subject_api():
    try:
        form, errors = validate_form(SubjectForm, request_payload())
        if errors:
            return validation_error_response(errors)
        subject = {"id": notifications.random_id()}
        subject.update(form_to_payload(form))
        subjects = state.get_latest_subjects()
        subjects.append(subject)
        state.save_subjects()
        return jsonify({"success": True, "subject": subject}), 201
    except Exception as e:
        logger.exception("Creating subject failed")
        return jsonify({"error": f"Create failed: {str(e)}"}), 500


@app.route('/admin/subjects/<subject_id>', methods=['DELETE'])
@require_roles('admin')
def admin_delete_subject_api(subject_id):
    subjects = state.get_latest_subjects()
    if not state.remove_by_id(subjects, subject_id):
        return jsonify({"error": "Subject not found"}), 404
    state.save_subjects()
    return jsonify({"success": True})


@app.route('/admin/faculty', methods=['GET'])
@require_roles('admin')
def admin_faculty_api():
    faculty = state.get_latest_faculty()
    query = (request.args.get("q") or "").strip()
    department = request.args.get("department") or "all"
    return jsonify({
        "faculty": filter_faculty(faculty, query, department),
        "stats": {
            "total": len(faculty),
            "available": len([f for f in faculty if f.get("availability") == "Available"]),
            "busy": len([f for f in faculty if f.get("availability") == "Busy"]),
            "byDesignation": count_by(
                faculty, "designation", ["Professor", "Associate Professor", "Assistant Professor"]
            )
        },
        "byDepartment": count_by(faculty, "department", fixtures.DEPARTMENTS)
    })


@app.route('/admin/faculty', methods=['POST'])
@require_roles('admin')
def admin_create_faculty_api():
    try:
        form, errors = validate_form(FacultyForm, request_payload())
        if errors:
            return validation_error_response(errors)
        member = {"id": notifications.random_id()}
        member.update(form_to_payload(form))
        faculty = state.get_latest_faculty()
        faculty.append(member)
        state.save_faculty()
        return jsonify({"success": True, "faculty": member}), 201
    except Exception as e:
        logger.exception("Creating faculty member failed")
        return jsonify({"error": f"Create failed: {str(e)}"}), 500


@app.route('/admin/faculty/<member_id>', methods=['DELETE'])
@require_roles('admin')
def admin_delete_faculty_api(member_id):
    faculty = state.get_latest_faculty()
    if not state.remove_by_id(faculty, member_id):
        return jsonify({"error": "Faculty member not found"}), 404
    state.save_faculty()
    return jsonify({"success": True})


# ----------------- Timetables -----------------


@app.route('/admin/timetables', methods=['GET'])
@require_roles('admin')
def admin_timetables_api():
    try:
        branch = request.args.get("branch") or "all"
        semester = request.args.get("semester") or "all"
        query = (request.args.get("q") or "").strip()
        timetables = mock_api.get_timetables(
            branch if branch != "all" else None,
            semester if semester != "all" else None
        )
        if query:
            timetables = [t for t in timetables if contains(t.get("branch"), query) or contains(t.get("stream"), query)]
        return jsonify({"timetables": timetables})
    except Exception as e:
        logger.exception("Loading timetables failed")
        notify("Error", "Failed to load timetables", "error")
        return jsonify({"error": f"Unable to load timetables: {str(e)}"}), 500


@app.route('/admin/timetables/<timetable_id>', methods=['DELETE'])
@require_roles('admin')
def admin_delete_timetable_api(timetable_id):
    try:
        timetables = state.get_latest_timetables()
        if not state.remove_by_id(timetables, timetable_id):
            return jsonify({"error": "Timetable not found"}), 404
        state.save_timetables()
        notify("Deleted", "Timetable has been deleted successfully", "success")
        return jsonify({"success": True})
    except Exception as e:
        logger.exception("Deleting timetable %s failed", timetable_id)
        notify("Error", "Failed to delete timetable", "error")
        return jsonify({"error": f"Delete failed: {str(e)}"}), 500


@app.route('/admin/timetables/<timetable_id>/export', methods=['POST'])
@require_roles('admin')
def admin_export_timetable_api(timetable_id):
    form, errors = validate_form(ExportForm, request_payload())
    if errors:
        return validation_error_response(errors)
    timetable = state.find_by_id(state.get_latest_timetables(), timetable_id)
    if not timetable:
        return jsonify({"error": "Timetable not found"}), 404

    message = (
        f"Exporting {timetable.get('branch')} Semester {timetable.get('semester')} "
        f"timetable as {form.format.upper()}..."
    )
    notify("Export Started", message, "info")
    notify("Export Complete", "Timetable exported successfully", "success")
    return jsonify({"success": True, "message": message})


@app.route('/admin/timetable/generate', methods=['POST'])
@require_roles('admin')
def generate_timetable_api():
    try:
        form, errors = validate_form(TimetableGenerateForm, request_payload())
        if errors:
            return validation_error_response(errors)

        data = form_to_payload(form)
        logger.info(
            "Generating timetable options for %s semester %s with %d subjects",
            data["branch"], data["semester"], len(data["subjects"])
        )
        options = mock_api.generate_timetable(data)
        for option in options:
            option["statistics"] = generator.calculate_schedule_stats(option["schedule"])

        generated = state.get_latest_generated_timetables()
        generated[session["user_id"]] = {
            "input": data,
            "options": options,
            "generatedAt": datetime.utcnow().isoformat() + "Z"
        }
        state.save_generated_timetables()
        notify(
            "Timetables Generated",
            "AI has generated 3 optimized timetable options for you to choose from.",
            "success"
        )
        return jsonify({"success": True, "options": options})
    except Exception as e:
        logger.exception("Error generating timetable")
        notify(
            "Generation Failed", "Failed to generate timetables. Please try again.", "error"
        )
        return jsonify({"error": f"Internal server error: {str(e)}"}), 500


@app.route('/admin/timetable/export', methods=['POST'])
@require_roles('admin')
def export_generated_timetable_api():
    form, errors = validate_form(ExportForm, request_payload())
    if errors:
        return validation_error_response(errors)
    if not form.option_id:
        return jsonify({"error": "optionId is required"}), 400

    generated = state.get_latest_generated_timetables().get(session["user_id"])
    if not generated:
        return jsonify({"error": "No generated timetables found"}), 404
    option = state.find_by_id(generated.get("options", []), form.option_id)
    if not option:
        return jsonify({"error": "Timetable option not found"}), 404

    file_name = generator.export_file_name(option["name"], form.format)
    notify("Export Started", f"Downloading {file_name}...", "info")
    notify("Export Complete", f"{file_name} has been downloaded successfully.", "success")
    return jsonify({"success": True, "fileName": file_name})


@app.route('/timetable/check_clash', methods=['POST'])
@require_roles('admin')
def check_clash_api():
    payload = request_payload()
    result = mock_api.check_for_clashes(payload.get("timeSlot"), payload.get("timetable"))
    return jsonify(result)


@app.route('/admin/analytics', methods=['GET'])
@require_roles('admin')
def admin_analytics_api():
    metric = request.args.get("metric") or "all"
    if metric not in ANALYTICS_METRICS:
        return jsonify({"error": f"metric must be one of: {', '.join(ANALYTICS_METRICS)}"}), 400
    series = fixtures.ANALYTICS if metric == "all" else {metric: fixtures.ANALYTICS[metric]}
    return jsonify({
        "timeRange": request.args.get("range") or "week",
        "metric": metric,
        "series": series
    })


# ----------------- Profile, Notifications, Preferences -----------------


@app.route('/profile', methods=['GET'])
@require_auth
def profile_api():
    return jsonify({"user": public_user(get_current_user())})


@app.route('/profile', methods=['PUT'])
@require_auth
def update_profile_api():
    try:
        form, errors = validate_form(ProfileForm, request_payload())
        if errors:
            return validation_error_response(errors)

        user = get_current_user()
        for other in state.get_latest_users().values():
            if other.get("id") != user.get("id") and (other.get("email") or "").lower() == form.email.lower():
                return jsonify({"error": "Email already exists"}), 409

        changes = form_to_payload(form, exclude={"phone"} if form.phone is None else None)
        updated = mock_api.update_user(user["id"], changes)
        notify("Profile Updated", "Your profile has been successfully updated.", "success")
        return jsonify({"success": True, "user": public_user(updated)})
    except Exception as e:
        logger.exception("Profile update failed")
        return jsonify({"error": f"Profile update failed: {str(e)}"}), 500


@app.route('/notifications', methods=['GET'])
@require_auth
def notifications_api():
    return jsonify({"notifications": notifications.list_notifications(session["user_id"])})


@app.route('/notifications/<notification_id>', methods=['DELETE'])
@require_auth
def delete_notification_api(notification_id):
    if not notifications.remove_notification(session["user_id"], notification_id):
        return jsonify({"error": "Notification not found"}), 404
    return jsonify({"success": True})


@app.route('/ui/preferences', methods=['GET'])
def preferences_api():
    return jsonify({
        "theme": session.get("theme", "light"),
        "sidebarOpen": session.get("sidebar_open", True)
    })


@app.route('/ui/preferences', methods=['PUT'])
def update_preferences_api():
    form, errors = validate_form(PreferencesForm, request_payload())
    if errors:
        return validation_error_response(errors)
    if form.theme is not None:
        session["theme"] = form.theme
    if form.sidebar_open is not None:
        session["sidebar_open"] = form.sidebar_open
    return preferences_api()


@app.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'message': 'Timetable Portal API is running',
        'version': '1.0'
    })


storage.init_storage()
state.load_all()


def main():
    logger.info("Starting Timetable Portal API on port %s", config.PORT)
    app.run(
        debug=config.DEBUG_MODE,
        host='0.0.0.0',
        port=config.PORT
    )


if __name__ == "__main__":
    main()
