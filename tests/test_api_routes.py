def _create(client, **body):
    body.setdefault("name", "Run")
    resp = client.post("/api/habits", json=body)
    assert resp.status_code == 201
    return resp.json()


def test_me_creates_local_user(client):
    resp = client.get("/api/me")

    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == "user_1"
    assert data["name"] == "You"
    assert data["total_points"] == 0
    assert data["rupee_value"] == 0


def test_onboarding_updates_profile(client):
    resp = client.post("/api/me/onboarding", json={"name": "Asha", "hobbies": ["chess"]})

    assert resp.status_code == 200
    assert resp.json()["has_completed_onboarding"] is True
    assert client.get("/api/me").json()["name"] == "Asha"


def test_habit_crud(client):
    habit = _create(client, emoji="🏃", total_days=10, start_date="2024-05-01T06:00:00Z")
    assert habit["start_date"] == "2024-05-01"
    assert habit["completion_rate"] == 0

    resp = client.patch(f"/api/habits/{habit['id']}", json={"name": "Jog"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Jog"

    assert client.get(f"/api/habits/{habit['id']}").json()["photo_items"] == []
    assert client.delete(f"/api/habits/{habit['id']}").status_code == 200
    assert client.get(f"/api/habits/{habit['id']}").status_code == 404


def test_blank_name_rejected(client):
    assert client.post("/api/habits", json={"name": "   "}).status_code == 400


def test_invalid_start_date_rejected(client):
    resp = client.post("/api/habits", json={"name": "Run", "start_date": "2024-13-01"})
    assert resp.status_code == 422


def test_complete_then_refused(client):
    habit = _create(client)

    first = client.post(f"/api/habits/{habit['id']}/complete")
    assert first.status_code == 200
    assert first.json()["show_completion"] is True
    assert first.json()["habit"]["total_points"] == 1

    second = client.post(f"/api/habits/{habit['id']}/complete")
    assert second.status_code == 400
    assert client.get("/api/me").json()["total_points"] == 1


def test_list_puts_pending_first(client):
    done = _create(client, name="Done")
    _create(client, name="Pending")
    client.post(f"/api/habits/{done['id']}/complete")

    names = [h["name"] for h in client.get("/api/habits").json()]
    assert names == ["Pending", "Done"]


def test_photos(client):
    habit = _create(client)
    resp = client.post(f"/api/habits/{habit['id']}/photos", json={"photo_data": "aGk="})

    assert resp.status_code == 201
    photos = client.get(f"/api/habits/{habit['id']}/photos").json()
    assert [p["id"] for p in photos] == [resp.json()["id"]]
    assert client.get("/api/habits/missing/photos").status_code == 404


def test_progress(client):
    habit = _create(client)
    client.post(f"/api/habits/{habit['id']}/complete")

    data = client.get("/api/me/progress").json()
    assert len(data["calendar"]) == 30
    assert data["calendar"][-1]["count"] == 1
    assert data["calendar"][-1]["level"] == 1
    assert data["streak"] == 1
    assert data["days_active"] == 1
    assert data["total_completions"] == 1
    assert len(data["weekly_activity"]) == 5
    assert data["wisdom"]


def test_calendar_image(client):
    resp = client.get("/api/me/calendar.png")

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert resp.content.startswith(b"\x89PNG")


def test_challenges_join_and_leaderboard(client):
    challenges = client.get("/api/challenges").json()
    assert len(challenges) == 8
    assert all(c["participant_count"] == 0 for c in challenges)

    mindful = client.get("/api/challenges", params={"category": "Mindfulness"}).json()
    assert [c["id"] for c in mindful] == ["predefined_7day_meditation"]

    resp = client.post("/api/challenges/predefined_7day_meditation/join")
    assert resp.status_code == 200
    assert resp.json()["challenge"]["participants"] == ["user_1"]

    board = client.get("/api/challenges/predefined_7day_meditation/leaderboard").json()
    assert board["participant_count"] == 1
    assert board["entries"][0]["rank"] == 1
    assert board["entries"][0]["medal"] == "🥇"
    assert board["you"]["user_id"] == "user_1"


def test_unknown_challenge(client):
    assert client.post("/api/challenges/nope/join").status_code == 404
    assert client.get("/api/challenges/nope/leaderboard").status_code == 404


def test_create_challenge(client):
    habit = _create(client)
    resp = client.post("/api/challenges", json={"name": "Run Club", "habit_id": habit["id"]})

    assert resp.status_code == 201
    assert resp.json()["participants"] == ["user_1"]
    missing = client.post("/api/challenges", json={"name": "Nope", "habit_id": "missing"})
    assert missing.status_code == 404


def test_rewards_and_cash(client):
    rewards = client.get("/api/rewards").json()
    assert rewards["balance"] == 0
    assert rewards["quick_rewards"] == []

    assert client.post("/api/rewards/cult_fit_10/unlock").status_code == 400
    assert client.post("/api/rewards/nope/unlock").status_code == 404

    options = client.get("/api/cash/options").json()
    assert options["unlocked"] is False
    assert [o["cost"] for o in options["options"]] == [7, 17, 34, 67]
    assert client.post("/api/cash/redeem", json={"amount": 10}).status_code == 400


def test_friends(client):
    assert client.get("/api/friends").json()["friends"] == []

    synced = client.post("/api/friends/sync").json()["friends"]
    assert len(synced) == 5
    assert synced[0]["id"] == "friend_3"
    assert len(client.get("/api/friends").json()["winning"]) == 5


def test_long_commitment_window_keeps_progress_working(client):
    _create(client, start_date="2024-01-01", total_days=3_000_000)

    assert client.get("/api/me/progress").status_code == 200
    assert client.get("/profile").status_code == 200


def test_commitment_fields_must_be_positive(client):
    assert client.post("/api/habits", json={"name": "Run", "total_days": -5}).status_code == 422
    assert client.post("/api/habits", json={"name": "Run", "total_days": 0}).status_code == 422
    assert client.post("/api/habits", json={"name": "Run", "times_per_day": -1}).status_code == 422

    habit = _create(client)
    resp = client.patch(f"/api/habits/{habit['id']}", json={"times_per_day": 0})
    assert resp.status_code == 422
