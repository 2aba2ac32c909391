class TestMessages:
    def test_send_and_receive(self, client, register, login):
        alice = register("alice")
        acme = register("acme", role="employer")

        r = client.post("/api/messages", json={"receiverId": alice["id"], "content": "Are you available?"})
        assert r.status_code == 201
        message = r.json()
        assert message["senderId"] == acme["id"]
        assert message["isRead"] is False

        sent = client.get("/api/messages?box=sent").json()
        assert [m["id"] for m in sent] == [message["id"]]
        assert client.get("/api/messages").json() == []

        login("alice")
        inbox = client.get("/api/messages").json()
        assert [m["id"] for m in inbox] == [message["id"]]

        r = client.put(f"/api/messages/{message['id']}/read")
        assert r.status_code == 200
        assert r.json()["isRead"] is True

    def test_sender_cannot_mark_read(self, client, register):
        alice = register("alice")
        register("acme", role="employer")
        message_id = client.post("/api/messages", json={"receiverId": alice["id"], "content": "Hi"}).json()["id"]
        assert client.put(f"/api/messages/{message_id}/read").status_code == 403

    def test_empty_message_rejected(self, client, register):
        alice = register("alice")
        register("acme", role="employer")
        r = client.post("/api/messages", json={"receiverId": alice["id"], "content": ""})
        assert r.status_code == 400

    def test_unknown_receiver(self, client, register):
        register("alice")
        r = client.post("/api/messages", json={"receiverId": 9999, "content": "Hello"})
        assert r.status_code == 404

    def test_bad_box(self, client, register):
        register("alice")
        assert client.get("/api/messages?box=trash").status_code == 400

    def test_requires_auth(self, client):
        assert client.get("/api/messages").status_code == 401
