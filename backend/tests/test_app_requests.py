"""Tests for the faculty request workflow between teachers and admins."""

from timetable_portal import state


LEAVE = {"date": "2024-03-04", "reason": "Attending a workshop in Pune", "requestType": "leave"}


def titles(client):
    return [n["title"] for n in client.get("/notifications").get_json()["notifications"]]


class TestTeacherRequests:
    def test_lists_own_requests_only(self, teacher_client):
        requests = teacher_client.get("/teacher/requests").get_json()["requests"]
        assert [r["id"] for r in requests] == ["1"]

    def test_submit(self, teacher_client):
        resp = teacher_client.post("/teacher/requests", json=LEAVE)
        assert resp.status_code == 201
        req = resp.get_json()["request"]
        assert req["status"] == "pending"
        assert req["teacherId"] == "TCH2024001"
        assert req["teacherName"] == "Prof. Neha Verma"
        assert titles(teacher_client)[0] == "Request Submitted"
        assert len(teacher_client.get("/teacher/requests").get_json()["requests"]) == 2

    def test_submit_validation(self, teacher_client):
        resp = teacher_client.post("/teacher/requests", json=dict(LEAVE, requestType="holiday"))
        assert resp.status_code == 400
        assert len(state.get_latest_faculty_requests()) == 3

    def test_teacher_dashboard(self, teacher_client):
        body = teacher_client.get("/teacher/dashboard").get_json()
        assert body["user"]["teacherId"] == "TCH2024001"
        assert body["requests"][0]["id"] == "1"
        assert body["workload"]


class TestAdminRequests:
    def test_counts_and_filters(self, admin_client):
        body = admin_client.get("/admin/requests").get_json()
        assert body["stats"] == {"total": 3, "pending": 2, "approved": 1, "rejected": 0}
        assert len(body["requests"]) == 3

        pending = admin_client.get("/admin/requests?status=pending").get_json()["requests"]
        assert [r["id"] for r in pending] == ["1", "3"]

        found = admin_client.get("/admin/requests?q=conference").get_json()["requests"]
        assert [r["id"] for r in found] == ["3"]

    def test_bad_status_filter(self, admin_client):
        assert admin_client.get("/admin/requests?status=archived").status_code == 400

    def test_approve(self, admin_client):
        resp = admin_client.post("/admin/requests/1/approve", json={"admin_note": "Approved, arrange cover"})
        assert resp.status_code == 200
        req = resp.get_json()["request"]
        assert req["status"] == "approved"
        assert req["resolvedBy"] == "3"
        assert req["adminNote"] == "Approved, arrange cover"
        assert titles(admin_client)[0] == "Request Approved"

    def test_reject(self, admin_client):
        resp = admin_client.post("/admin/requests/3/reject")
        assert resp.get_json()["request"]["status"] == "rejected"
        assert titles(admin_client)[0] == "Request Rejected"

    def test_resolved_request_cannot_change(self, admin_client):
        resp = admin_client.post("/admin/requests/2/reject")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Request already approved"

    def test_unknown_request(self, admin_client):
        assert admin_client.post("/admin/requests/999/approve").status_code == 404

    def test_teacher_cannot_approve(self, teacher_client):
        assert teacher_client.post("/admin/requests/1/approve").status_code == 403

    def test_submitted_request_reaches_admin(self, teacher_client, admin_client):
        new_id = teacher_client.post("/teacher/requests", json=LEAVE).get_json()["request"]["id"]
        pending = admin_client.get("/admin/requests?status=pending").get_json()["requests"]
        assert new_id in [r["id"] for r in pending]
        assert admin_client.post(f"/admin/requests/{new_id}/approve").status_code == 200
        own = teacher_client.get("/teacher/requests").get_json()["requests"]
        assert state.find_by_id(own, new_id)["status"] == "approved"


class TestNotificationScope:
    def test_outcome_reaches_requesting_teacher(self, admin_client, teacher_client):
        admin_client.post("/admin/requests/1/approve")
        notices = teacher_client.get("/notifications").get_json()["notifications"]
        assert notices[0]["title"] == "Request Approved"
        assert notices[0]["message"] == "Your leave request for 2024-02-15 has been approved."

    def test_other_users_do_not_see_admin_notices(self, admin_client, student_client):
        admin_client.post("/admin/requests/1/approve")
        admin_notice = admin_client.get("/notifications").get_json()["notifications"][0]
        assert admin_notice["title"] == "Request Approved"

        assert titles(student_client) == ["Welcome!", "Reminder"]
        assert student_client.delete(f"/notifications/{admin_notice['id']}").status_code == 404
        assert titles(admin_client)[0] == "Request Approved"

    def test_rejection_for_teacher_without_account(self, admin_client, teacher_client):
        """Request 3 belongs to a teacher with no portal account; only the admin is told."""
        admin_client.post("/admin/requests/3/reject")
        assert titles(admin_client)[0] == "Request Rejected"
        assert titles(teacher_client) == ["Welcome!", "Reminder"]


class TestResolveInput:
    def test_non_text_admin_note_rejected(self, admin_client):
        resp = admin_client.post("/admin/requests/1/approve", json={"admin_note": 42})
        assert resp.status_code == 400
        assert resp.get_json()["validation_errors"][0]["field"] == "adminNote"
        assert state.find_by_id(state.get_latest_faculty_requests(), "1")["status"] == "pending"

    def test_blank_note_not_stored(self, admin_client):
        req = admin_client.post("/admin/requests/1/approve", json={"adminNote": "   "}).get_json()["request"]
        assert "adminNote" not in req
