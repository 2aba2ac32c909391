class TestWishlist:
    def _job(self, client, register, job_payload):
        register("acme", role="employer")
        return client.post("/api/jobs", json=job_payload()).json()["id"]

    def test_save_and_list(self, client, register, job_payload):
        job_id = self._job(client, register, job_payload)
        register("alice")

        r = client.post("/api/wishlist", json={"jobId": job_id})
        assert r.status_code == 201
        assert r.json()["job"]["id"] == job_id

        r = client.get("/api/wishlist")
        assert r.status_code == 200
        assert [e["jobId"] for e in r.json()] == [job_id]

    def test_save_twice(self, client, register, job_payload):
        job_id = self._job(client, register, job_payload)
        register("alice")
        client.post("/api/wishlist", json={"jobId": job_id})
        r = client.post("/api/wishlist", json={"jobId": job_id})
        assert r.status_code == 400

    def test_unknown_job(self, client, register):
        register("alice")
        assert client.post("/api/wishlist", json={"jobId": 9999}).status_code == 404

    def test_employer_forbidden(self, client, register, job_payload):
        job_id = self._job(client, register, job_payload)
        assert client.post("/api/wishlist", json={"jobId": job_id}).status_code == 403


class TestWatchlist:
    def test_watch_candidate(self, client, register):
        alice = register("alice")
        client.put("/api/profile/job-seeker", json={"firstName": "Alice", "lastName": "Liddell"})
        register("acme", role="employer")

        r = client.post("/api/watchlist", json={"jobSeekerId": alice["id"], "notes": "Strong Python"})
        assert r.status_code == 201
        data = r.json()
        assert data["notes"] == "Strong Python"
        assert data["jobSeeker"]["profile"]["firstName"] == "Alice"

        r = client.get("/api/watchlist")
        assert [e["jobSeekerId"] for e in r.json()] == [alice["id"]]

    def test_update_notes(self, client, register):
        alice = register("alice")
        register("acme", role="employer")
        entry_id = client.post("/api/watchlist", json={"jobSeekerId": alice["id"]}).json()["id"]

        r = client.put(f"/api/watchlist/{entry_id}", json={"notes": "Call next week"})
        assert r.status_code == 200
        assert r.json()["notes"] == "Call next week"

    def test_other_employer_cannot_update(self, client, register):
        alice = register("alice")
        register("acme", role="employer")
        entry_id = client.post("/api/watchlist", json={"jobSeekerId": alice["id"]}).json()["id"]

        register("globex", role="employer")
        r = client.put(f"/api/watchlist/{entry_id}", json={"notes": "Mine now"})
        assert r.status_code == 403

    def test_only_job_seekers_watched(self, client, register):
        other = register("globex", role="employer")
        register("acme", role="employer")
        r = client.post("/api/watchlist", json={"jobSeekerId": other["id"]})
        assert r.status_code == 400

    def test_watch_twice(self, client, register):
        alice = register("alice")
        register("acme", role="employer")
        client.post("/api/watchlist", json={"jobSeekerId": alice["id"]})
        r = client.post("/api/watchlist", json={"jobSeekerId": alice["id"]})
        assert r.status_code == 400

    def test_seeker_forbidden(self, client, register):
        alice = register("alice")
        assert client.post("/api/watchlist", json={"jobSeekerId": alice["id"]}).status_code == 403
