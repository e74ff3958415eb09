"""
API tests for admin review, statistics and paid submissions
"""
import pytest

from resume_builder.services.expert_directory import seed_experts

API = "/api"


@pytest.fixture
def submitted_resume(client, student_headers, submission_payload):
    """A resume with one paid pending submission; returns (resume_id, submission_id)"""
    resume_id = client.post(
        f"{API}/resumes", json={"title": "Intern Resume"}, headers=student_headers
    ).json()["id"]
    client.put(
        f"{API}/resumes/{resume_id}",
        json={"skills": [{"name": "Python", "level": "Advanced"}]},
        headers=student_headers
    )
    submission = client.post(
        f"{API}/resumes/{resume_id}/submit", json=submission_payload, headers=student_headers
    ).json()["submission"]
    return resume_id, submission["id"]


class TestAdminAccess:
    """Admin routes need an admin token"""

    def test_student_is_forbidden(self, client, student_headers):
        for path in ("/admin/resumes", "/admin/stats", "/admin/paid-submissions", "/admin/submission-stats"):
            assert client.get(f"{API}{path}", headers=student_headers).status_code == 403

    def test_anonymous_is_unauthorized(self, client):
        assert client.get(f"{API}/admin/stats").status_code == 401


class TestSubmissionStatus:
    """PUT /admin/submissions/{id}/status"""

    def test_review_scenario(self, client, admin_headers, submitted_resume):
        _, submission_id = submitted_resume

        reviewing = client.put(
            f"{API}/admin/submissions/{submission_id}/status",
            json={"status": "reviewing"},
            headers=admin_headers
        )
        assert reviewing.status_code == 200, reviewing.text
        assert reviewing.json()["reviewed_at"] is None

        completed = client.put(
            f"{API}/admin/submissions/{submission_id}/status",
            json={"status": "completed", "notes": "Great resume"},
            headers=admin_headers
        )
        data = completed.json()
        assert data["status"] == "completed"
        assert data["reviewed_at"] is not None
        assert "Great resume" in data["reviewer_notes"]

    def test_notes_append(self, client, admin_headers, submitted_resume):
        _, submission_id = submitted_resume
        url = f"{API}/admin/submissions/{submission_id}/status"

        client.put(url, json={"status": "reviewing", "notes": "Looking"}, headers=admin_headers)
        data = client.put(url, json={"status": "revision", "notes": "Add numbers"}, headers=admin_headers).json()

        assert data["reviewer_notes"] == "Looking\nAdd numbers"

    def test_invalid_transition(self, client, admin_headers, submitted_resume):
        _, submission_id = submitted_resume

        response = client.put(
            f"{API}/admin/submissions/{submission_id}/status",
            json={"status": "completed"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_unknown_status(self, client, admin_headers, submitted_resume):
        _, submission_id = submitted_resume

        response = client.put(
            f"{API}/admin/submissions/{submission_id}/status",
            json={"status": "archived"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_missing_submission(self, client, admin_headers):
        response = client.put(
            f"{API}/admin/submissions/missing/status",
            json={"status": "reviewing"},
            headers=admin_headers
        )
        assert response.status_code == 404


class TestResumeReview:
    """PUT /admin/resumes/{id}/review"""

    def test_review_sets_score(self, client, admin_headers, submitted_resume):
        resume_id, submission_id = submitted_resume

        response = client.put(
            f"{API}/admin/resumes/{resume_id}/review",
            json={"status": "rejected", "notes": "Too short", "score": 40},
            headers=admin_headers
        )
        data = response.json()
        assert response.status_code == 200, response.text
        assert data["id"] == submission_id
        assert data["status"] == "rejected"
        assert data["review_score"] == 40
        assert data["reviewed_at"] is not None

    def test_approve_pending_submission(self, client, admin_headers, submitted_resume):
        """Legacy 'approved' completes a submission that was never put in review"""
        resume_id, submission_id = submitted_resume

        response = client.put(
            f"{API}/admin/resumes/{resume_id}/review",
            json={"status": "approved", "notes": "ok", "score": 8},
            headers=admin_headers
        )
        data = response.json()
        assert response.status_code == 200, response.text
        assert data["id"] == submission_id
        assert data["status"] == "completed"
        assert data["review_score"] == 8
        assert data["reviewer_notes"] == "ok"
        assert data["reviewed_at"] is not None

    def test_request_revision_on_pending_submission(self, client, admin_headers, submitted_resume):
        """Legacy 'needs_revision' sends a pending submission back to the student"""
        resume_id, _ = submitted_resume

        response = client.put(
            f"{API}/admin/resumes/{resume_id}/review",
            json={"status": "needs_revision", "notes": "Add metrics"},
            headers=admin_headers
        )
        data = response.json()
        assert response.status_code == 200, response.text
        assert data["status"] == "revision"
        assert data["reviewed_at"] is not None

    def test_completed_submission_cannot_be_reviewed_again(self, client, admin_headers, submitted_resume):
        resume_id, _ = submitted_resume
        url = f"{API}/admin/resumes/{resume_id}/review"

        client.put(url, json={"status": "approved"}, headers=admin_headers)
        response = client.put(url, json={"status": "rejected"}, headers=admin_headers)

        assert response.status_code == 400

    def test_status_endpoint_keeps_strict_transitions(self, client, admin_headers, submitted_resume):
        _, submission_id = submitted_resume

        response = client.put(
            f"{API}/admin/submissions/{submission_id}/status",
            json={"status": "approved"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_score_range(self, client, admin_headers, submitted_resume):
        resume_id, _ = submitted_resume

        response = client.put(
            f"{API}/admin/resumes/{resume_id}/review",
            json={"status": "reviewing", "score": 140},
            headers=admin_headers
        )
        assert response.status_code == 422

    def test_resume_without_submission(self, client, admin_headers, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]

        response = client.put(
            f"{API}/admin/resumes/{resume_id}/review",
            json={"status": "reviewing"},
            headers=admin_headers
        )
        assert response.status_code == 404


class TestAdminQueries:
    """Listing and statistics"""

    def test_list_resumes(self, client, admin_headers, student_headers, submitted_resume):
        resume_id, submission_id = submitted_resume
        client.post(f"{API}/resumes", json={"title": "Draft"}, headers=student_headers)

        data = client.get(f"{API}/admin/resumes", headers=admin_headers).json()

        assert data["pagination"]["total"] == 2
        first = data["resumes"][0]
        assert first["id"] == resume_id
        assert first["submission_id"] == submission_id
        assert first["status"] == "pending"
        assert first["email"] == "student@example.com"
        assert data["resumes"][1]["status"] is None

    def test_list_resumes_status_filter(self, client, admin_headers, student_headers, submitted_resume):
        client.post(f"{API}/resumes", json={"title": "Draft"}, headers=student_headers)

        pending = client.get(f"{API}/admin/resumes?status=pending", headers=admin_headers).json()
        completed = client.get(f"{API}/admin/resumes?status=completed", headers=admin_headers).json()

        assert pending["pagination"]["total"] == 1
        assert completed["pagination"]["total"] == 0

    def test_list_resumes_pagination(self, client, admin_headers, student_headers):
        for index in range(3):
            client.post(f"{API}/resumes", json={"title": f"R{index}"}, headers=student_headers)

        data = client.get(f"{API}/admin/resumes?page=2&limit=2", headers=admin_headers).json()

        assert len(data["resumes"]) == 1
        assert data["pagination"]["total_pages"] == 2
        assert data["pagination"]["has_prev"] is True
        assert data["pagination"]["has_next"] is False

    def test_resume_detail(self, client, admin_headers, submitted_resume):
        resume_id, submission_id = submitted_resume

        data = client.get(f"{API}/admin/resumes/{resume_id}", headers=admin_headers).json()

        assert data["skills"] == [{"name": "Python", "level": "Advanced"}]
        assert data["user"]["first_name"] == "Asha"
        assert data["submission"]["id"] == submission_id
        assert data["submission_count"] == 1

    def test_resume_detail_missing(self, client, admin_headers):
        assert client.get(f"{API}/admin/resumes/missing", headers=admin_headers).status_code == 404

    def test_stats(self, client, admin_headers, student_headers, submitted_resume):
        resume_id, submission_id = submitted_resume
        client.post(f"{API}/resumes", json={"title": "Draft"}, headers=student_headers)

        stats = client.get(f"{API}/admin/stats", headers=admin_headers).json()
        assert stats == {
            "total_resumes": 2,
            "pending_reviews": 1,
            "approved": 0,
            "rejected": 0,
            "avg_completion": 3.0
        }

        url = f"{API}/admin/submissions/{submission_id}/status"
        client.put(url, json={"status": "reviewing"}, headers=admin_headers)
        client.put(url, json={"status": "approved"}, headers=admin_headers)

        stats = client.get(f"{API}/admin/stats", headers=admin_headers).json()
        assert stats["pending_reviews"] == 0
        assert stats["approved"] == 1

    def test_paid_submissions(self, client, admin_headers, submitted_resume):
        resume_id, submission_id = submitted_resume

        data = client.get(f"{API}/admin/paid-submissions", headers=admin_headers).json()

        assert data["pagination"]["total"] == 1
        row = data["submissions"][0]
        assert row["id"] == resume_id
        assert row["submission_id"] == submission_id
        assert row["title"] == "Intern Resume"
        assert row["payment_amount"] == 249
        assert row["first_name"] == "Asha"

    def test_submission_stats(self, client, admin_headers, submitted_resume):
        _, submission_id = submitted_resume
        client.put(
            f"{API}/admin/submissions/{submission_id}/status",
            json={"status": "reviewing"},
            headers=admin_headers
        )

        stats = client.get(f"{API}/admin/submission-stats", headers=admin_headers).json()
        assert stats == {
            "total_paid": 1,
            "total_revenue": 249.0,
            "pending_review": 0,
            "in_review": 1,
            "revision": 0,
            "completed": 0
        }


class TestExperts:
    """Expert listing and assignment"""

    def test_list_and_assign(self, client, db, admin_headers, submitted_resume):
        seed_experts(db)
        _, submission_id = submitted_resume

        experts = client.get(f"{API}/admin/experts", headers=admin_headers).json()
        assert [e["name"] for e in experts] == ["Amit Patel", "Dr. Rajesh Kumar", "Priya Sharma"]

        response = client.put(
            f"{API}/admin/submissions/{submission_id}/assign",
            json={"expert_id": experts[0]["id"]},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["expert_id"] == experts[0]["id"]
