"""
Test suite for job endpoints.

Tests cover:
- Job creation
- Job retrieval and filtering
- Job updates and deletion
- Error handling
"""

import pytest
from app.models.job import Job


@pytest.fixture
def seeded(seeded_service):
    return seeded_service


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_job_success(self, client, sample_job_data):
        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] is not None
        assert data["title"] == sample_job_data["title"]
        assert data["applicants"] == 0
        assert data["posted"] == "true"

    def test_create_job_missing_title(self, client, sample_job_data):
        del sample_job_data["title"]

        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 422  # Validation error

    def test_create_job_rejects_non_boolean_posted_text(self, client, sample_job_data):
        sample_job_data["posted"] = "yes"

        response = client.post("/api/jobs", json=sample_job_data)

        assert response.status_code == 422


class TestJobRetrieval:
    """Tests for job retrieval endpoints"""

    def test_list_jobs(self, client, seeded):
        response = client.get("/api/jobs")

        assert response.status_code == 200
        assert len(response.json()) == 5

    def test_list_featured(self, client, seeded):
        response = client.get("/api/jobs/featured")

        titles = [job["title"] for job in response.json()]
        assert titles == ["Senior Frontend Developer", "Product Manager", "Data Scientist"]

    def test_get_job_by_id(self, client, seeded):
        job_id = seeded.list_all()[2].id

        response = client.get(f"/api/jobs/{job_id}")

        assert response.status_code == 200
        assert response.json()["title"] == "Backend Engineer"

    def test_get_nonexistent_job(self, client):
        response = client.get("/api/jobs/99999")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

    def test_jobs_by_category(self, client, seeded):
        response = client.get("/api/jobs/category/design")

        assert [job["title"] for job in response.json()] == ["UX Designer"]

    def test_jobs_by_location(self, client, seeded):
        response = client.get("/api/jobs/location/bangalore")

        titles = {job["title"] for job in response.json()}
        assert titles == {"Senior Frontend Developer", "UX Designer"}

    def test_search_defaults_to_all(self, client, seeded):
        response = client.get("/api/jobs/search")

        assert len(response.json()) == 5

    def test_search_with_filters(self, client, seeded):
        response = client.get("/api/jobs/search", params={
            "search": "python",
            "category": "data",
            "location": "remote"
        })

        assert [job["title"] for job in response.json()] == ["Data Scientist"]

    def test_filters(self, client, seeded):
        response = client.get("/api/jobs/filters")

        assert response.status_code == 200
        data = response.json()
        assert data["categories"]["all"] == 5
        assert data["categories"]["engineering"] == 2
        assert data["locations"]["hyderabad-/-hybrid"] == "Hyderabad / Hybrid"


class TestJobUpdate:
    """Tests for job updates"""

    def test_update_job(self, client, db_session, sample_job_data):
        job = Job(**sample_job_data, applicants=11)
        db_session.add(job)
        db_session.commit()

        payload = dict(sample_job_data, title="Principal SRE", featured=True, posted="false")
        response = client.put(f"/api/jobs/{job.id}", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Principal SRE"
        assert data["featured"] is True
        assert data["posted"] == "false"
        assert data["applicants"] == 11

    def test_update_nonexistent_job(self, client, sample_job_data):
        response = client.put("/api/jobs/99999", json=sample_job_data)

        assert response.status_code == 404


class TestJobDeletion:
    """Tests for job deletion"""

    def test_delete_job(self, client, seeded):
        job_id = seeded.list_all()[0].id

        response = client.delete(f"/api/jobs/{job_id}")
        assert response.status_code == 204

        response = client.get(f"/api/jobs/{job_id}")
        assert response.status_code == 404

    def test_delete_nonexistent_job(self, client):
        response = client.delete("/api/jobs/99999")

        assert response.status_code == 204


class TestHealthAndCors:
    """Tests for health endpoints and CORS headers"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_reports_database(self, client):
        response = client.get("/health/detailed")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"

    def test_cors_preflight_allows_configured_origin(self, client):
        response = client.options("/api/jobs", headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PUT",
        })

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert response.headers["access-control-allow-credentials"] == "true"
        assert response.headers["access-control-max-age"] == "3600"

    def test_cors_exposes_headers(self, client, seeded):
        response = client.get("/api/jobs", headers={"Origin": "http://localhost:3000"})

        exposed = response.headers["access-control-expose-headers"]
        assert "Authorization" in exposed
