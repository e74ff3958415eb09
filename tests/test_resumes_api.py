"""
API tests for student resume endpoints
"""
from resume_builder.models import SECTION_COLUMNS

API = "/api"


class TestResumeCrud:
    """Create, read, list and delete"""

    def test_requires_token(self, client):
        response = client.get(f"{API}/resumes")
        assert response.status_code == 401

    def test_rejects_bad_token(self, client):
        response = client.get(f"{API}/resumes", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401

    def test_create_then_get_defaults(self, client, student_headers):
        created = client.post(f"{API}/resumes", json={}, headers=student_headers)
        assert created.status_code == 201, created.text

        resume_id = created.json()["id"]
        data = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()

        assert data["title"] == "My Resume"
        assert data["completion_percentage"] == 0
        assert data["personal_info"] == {}
        for _, column, _ in SECTION_COLUMNS[1:]:
            assert data[column] == [], column

    def test_create_with_title(self, client, student_headers):
        created = client.post(f"{API}/resumes", json={"title": "Intern Resume"}, headers=student_headers)
        resume_id = created.json()["id"]

        data = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()
        assert data["title"] == "Intern Resume"

    def test_create_blank_title_rejected(self, client, student_headers):
        response = client.post(f"{API}/resumes", json={"title": "  "}, headers=student_headers)
        assert response.status_code == 400

    def test_list_returns_summaries(self, client, student_headers):
        client.post(f"{API}/resumes", json={"title": "One"}, headers=student_headers)
        client.post(f"{API}/resumes", json={"title": "Two"}, headers=student_headers)

        response = client.get(f"{API}/resumes", headers=student_headers)
        assert response.status_code == 200

        rows = response.json()
        assert {r["title"] for r in rows} == {"One", "Two"}
        assert set(rows[0]) == {
            "id", "title", "template_id", "is_active",
            "completion_percentage", "created_at", "updated_at"
        }

    def test_delete(self, client, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]

        response = client.delete(f"{API}/resumes/{resume_id}", headers=student_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Resume deleted successfully"}

        assert client.get(f"{API}/resumes/{resume_id}", headers=student_headers).status_code == 404
        assert client.delete(f"{API}/resumes/{resume_id}", headers=student_headers).status_code == 404


class TestOwnershipIsolation:
    """Another user's resume looks exactly like a missing one"""

    def test_foreign_access_matches_missing(self, client, student_headers, other_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]

        for method, body in (("get", None), ("put", {"title": "Hijack"}), ("delete", None)):
            foreign = client.request(method, f"{API}/resumes/{resume_id}", json=body, headers=other_headers)
            missing = client.request(method, f"{API}/resumes/missing-id", json=body, headers=other_headers)
            assert foreign.status_code == missing.status_code == 404
            assert foreign.json() == missing.json()

        data = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()
        assert data["title"] == "My Resume"


class TestResumeSave:
    """PUT /resumes/{id}"""

    def test_skill_scenario(self, client, student_headers):
        resume_id = client.post(
            f"{API}/resumes", json={"title": "Intern Resume"}, headers=student_headers
        ).json()["id"]

        saved = client.put(
            f"{API}/resumes/{resume_id}",
            json={"skills": [{"name": "Python", "level": "Advanced"}]},
            headers=student_headers
        )
        assert saved.status_code == 200, saved.text
        body = saved.json()
        assert body["success"] is True
        assert body["data"]["id"] == resume_id
        assert body["data"]["title"] == "Intern Resume"
        assert body["data"]["completion_percentage"] == 6

        data = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()
        assert data["skills"] == [{"name": "Python", "level": "Advanced"}]
        assert data["personal_info"] == {}
        for _, column, _ in SECTION_COLUMNS[1:]:
            if column != "skills":
                assert data[column] == [], column
        assert data["completion_percentage"] == 6

    def test_empty_save_changes_nothing(self, client, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]
        client.put(
            f"{API}/resumes/{resume_id}",
            json={
                "personalInfo": {"firstName": "Asha", "lastName": "Rao"},
                "education": [{"institution": "COEP", "degree": "B.Tech"}]
            },
            headers=student_headers
        )
        before = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()

        saved = client.put(
            f"{API}/resumes/{resume_id}",
            json={"education": None, "skills": None},
            headers=student_headers
        )
        after = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()

        assert saved.json()["data"]["completion_percentage"] == 12
        for _, column, _ in SECTION_COLUMNS:
            assert after[column] == before[column], column
        assert after["title"] == before["title"]

    def test_partial_saves_accumulate_completion(self, client, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]
        client.put(f"{API}/resumes/{resume_id}", json={"projects": [{"title": "Bot"}]}, headers=student_headers)

        saved = client.put(
            f"{API}/resumes/{resume_id}",
            json={"languages": [{"name": "Marathi", "level": "Native"}]},
            headers=student_headers
        )
        assert saved.json()["data"]["completion_percentage"] == 12

    def test_unknown_entry_fields_are_kept(self, client, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]
        entry = {"company": "Acme", "position": "Intern", "isCurrent": True}

        client.put(f"{API}/resumes/{resume_id}", json={"experience": [entry]}, headers=student_headers)

        data = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()
        assert data["experience"] == [entry]

    def test_section_shape_validated(self, client, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]

        response = client.put(
            f"{API}/resumes/{resume_id}",
            json={"education": {"institution": "not a list"}},
            headers=student_headers
        )
        assert response.status_code == 422

    def test_template_change(self, client, student_headers):
        resume_id = client.post(f"{API}/resumes", json={}, headers=student_headers).json()["id"]
        client.put(f"{API}/resumes/{resume_id}", json={"templateId": "classic"}, headers=student_headers)

        data = client.get(f"{API}/resumes/{resume_id}", headers=student_headers).json()
        assert data["template_id"] == "classic"
