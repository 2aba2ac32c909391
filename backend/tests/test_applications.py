from fastapi import Depends

from jobboard.dependencies import require_not_applied, require_open_job
from jobboard.main import app
from jobboard.models.job import Job


class TestApply:
    def _posted_job(self, client, register, job_payload, **overrides):
        register("acme", role="employer")
        r = client.post("/api/jobs", json=job_payload(**overrides))
        assert r.status_code == 201, r.text
        return r.json()["id"]

    def test_apply_defaults(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        seeker = register("alice")

        r = client.post(f"/api/jobs/{job_id}/apply", json={"coverLetter": "Hello there"})
        assert r.status_code == 201
        data = r.json()
        assert data["jobId"] == job_id
        assert data["jobSeekerId"] == seeker["id"]
        assert data["status"] == "applied"
        assert data["resumeUrl"] is None
        assert data["coverLetter"] == "Hello there"
        assert data["compatibilityScore"] == 75.5

    def test_apply_without_body(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        register("alice")
        r = client.post(f"/api/jobs/{job_id}/apply")
        assert r.status_code == 201
        assert r.json()["status"] == "applied"

    def test_apply_with_resume(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        register("alice")
        r = client.post(f"/api/jobs/{job_id}/apply", json={"resumeUrl": "https://example.com/cv.pdf"})
        assert r.status_code == 201
        assert r.json()["resumeUrl"] == "https://example.com/cv.pdf"

    def test_invalid_resume_url(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        register("alice")
        r = client.post(f"/api/jobs/{job_id}/apply", json={"resumeUrl": "not a url"})
        assert r.status_code == 400

    def test_apply_twice(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        register("alice")

        first = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert first.status_code == 201
        second = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert second.status_code == 400
        assert "already applied" in second.json()["detail"]

    def test_inactive_job_refuses_seeker(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload, isActive=False)
        register("alice")
        r = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert r.status_code == 400
        assert "no longer accepting" in r.json()["detail"]

    def test_inactive_job_refuses_employer(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload, isActive=False)
        register("globex", role="employer")
        r = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert r.status_code == 400

    def test_expired_job_refuses(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload, expiresAt="2000-01-01T00:00:00Z")
        register("alice")
        r = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert r.status_code == 400

    def test_employer_cannot_apply_to_active_job(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        r = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert r.status_code == 403

    def test_apply_requires_auth(self, client, register, job_payload):
        job_id = self._posted_job(client, register, job_payload)
        client.post("/api/logout")
        r = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert r.status_code == 401

    def test_apply_unknown_job(self, client, register):
        register("alice")
        assert client.post("/api/jobs/9999/apply", json={}).status_code == 404


class TestJobApplications:
    def _setup(self, client, register, job_payload):
        """acme posts a job; alice and bob apply. Leaves the client logged in as bob."""
        register("acme", role="employer")
        job_id = client.post("/api/jobs", json=job_payload()).json()["id"]

        register("alice")
        client.put("/api/profile/job-seeker", json={"firstName": "Alice", "lastName": "Liddell"})
        first = client.post(f"/api/jobs/{job_id}/apply", json={}).json()

        register("bob")
        second = client.post(f"/api/jobs/{job_id}/apply", json={}).json()
        return job_id, first, second

    def test_owner_lists_applications_newest_first(self, client, register, login, job_payload):
        job_id, first, second = self._setup(client, register, job_payload)
        login("acme")

        r = client.get(f"/api/jobs/{job_id}/applications")
        assert r.status_code == 200
        data = r.json()
        assert [a["id"] for a in data] == [second["id"], first["id"]]
        assert data[1]["jobSeeker"]["username"] == "alice"
        assert data[1]["jobSeeker"]["profile"]["firstName"] == "Alice"
        assert data[0]["jobSeeker"]["profile"] is None

    def test_admin_lists_applications(self, client, register, job_payload):
        job_id, _, _ = self._setup(client, register, job_payload)
        register("root", role="admin")
        assert client.get(f"/api/jobs/{job_id}/applications").status_code == 200

    def test_other_employer_forbidden(self, client, register, job_payload):
        job_id, _, _ = self._setup(client, register, job_payload)
        register("globex", role="employer")
        assert client.get(f"/api/jobs/{job_id}/applications").status_code == 403

    def test_seeker_forbidden(self, client, register, job_payload):
        job_id, _, _ = self._setup(client, register, job_payload)
        assert client.get(f"/api/jobs/{job_id}/applications").status_code == 403

    def test_anonymous_unauthorized(self, client, register, job_payload):
        job_id, _, _ = self._setup(client, register, job_payload)
        client.post("/api/logout")
        assert client.get(f"/api/jobs/{job_id}/applications").status_code == 401


class TestApplicationStatus:
    def _applied(self, client, register, login, job_payload):
        register("acme", role="employer")
        job_id = client.post("/api/jobs", json=job_payload()).json()["id"]
        register("alice")
        application = client.post(f"/api/jobs/{job_id}/apply", json={}).json()
        login("acme")
        return application

    def test_status_round_trip(self, client, register, login, job_payload):
        application = self._applied(client, register, login, job_payload)

        r = client.put(f"/api/applications/{application['id']}", json={"status": "interviewing"})
        assert r.status_code == 200
        assert r.json()["status"] == "interviewing"

        r = client.get(f"/api/applications/{application['id']}")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "interviewing"
        assert data["updatedAt"] > application["updatedAt"]
        assert data["job"]["id"] == application["jobId"]

    def test_invalid_status(self, client, register, login, job_payload):
        application = self._applied(client, register, login, job_payload)
        r = client.put(f"/api/applications/{application['id']}", json={"status": "hired"})
        assert r.status_code == 400

    def test_seeker_cannot_change_status(self, client, register, login, job_payload):
        application = self._applied(client, register, login, job_payload)
        login("alice")
        r = client.put(f"/api/applications/{application['id']}", json={"status": "offered"})
        assert r.status_code == 403

    def test_admin_can_change_status(self, client, register, login, job_payload):
        application = self._applied(client, register, login, job_payload)
        register("root", role="admin")
        r = client.put(f"/api/applications/{application['id']}", json={"status": "rejected"})
        assert r.status_code == 200

    def test_unknown_application(self, client, register):
        register("acme", role="employer")
        assert client.put("/api/applications/9999", json={"status": "reviewed"}).status_code == 404

    def test_requires_auth(self, client):
        assert client.put("/api/applications/1", json={"status": "reviewed"}).status_code == 401


class TestOwnApplications:
    def test_seeker_lists_own_applications(self, client, register, job_payload):
        register("acme", role="employer")
        job_id = client.post("/api/jobs", json=job_payload()).json()["id"]
        register("alice")
        client.post(f"/api/jobs/{job_id}/apply", json={})

        r = client.get("/api/applications")
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 1
        assert data[0]["job"]["title"] == "Backend Engineer"

    def test_employer_has_no_own_applications(self, client, register):
        register("acme", role="employer")
        assert client.get("/api/applications").status_code == 403

    def test_other_seeker_cannot_view(self, client, register, job_payload):
        register("acme", role="employer")
        job_id = client.post("/api/jobs", json=job_payload()).json()["id"]
        register("alice")
        application_id = client.post(f"/api/jobs/{job_id}/apply", json={}).json()["id"]

        assert client.get(f"/api/applications/{application_id}").status_code == 200
        register("bob")
        assert client.get(f"/api/applications/{application_id}").status_code == 403


class TestConcurrentApply:
    def test_unique_index_answers_400(self, client, register, job_payload):
        async def skip_duplicate_check(job: Job = Depends(require_open_job)) -> Job:
            return job

        register("acme", role="employer")
        job_id = client.post("/api/jobs", json=job_payload()).json()["id"]
        register("alice")

        app.dependency_overrides[require_not_applied] = skip_duplicate_check
        first = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert first.status_code == 201
        second = client.post(f"/api/jobs/{job_id}/apply", json={})
        assert second.status_code == 400
        assert "already applied" in second.json()["detail"]
