import os
from pathlib import Path

from hira.db.base import BASE_DIR

TEMPLATE_DIR = BASE_DIR / "templates"


def test_root_redirects_to_dashboard(client):
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code in (302, 307)
    assert resp.headers.get("location") == "/dashboard"


def test_dashboard_lists_habits(client):
    client.post("/api/habits", json={"name": "Meditate"})

    resp = client.get("/dashboard")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Meditate" in resp.text


def test_complete_from_dashboard_form(client):
    habit = client.post("/api/habits", json={"name": "Meditate"}).json()

    resp = client.post(f"/habits/{habit['id']}/complete", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers.get("location") == "/dashboard"

    # a second attempt is refused but still lands back on the dashboard
    again = client.post(f"/habits/{habit['id']}/complete", follow_redirects=False)
    assert again.status_code == 303
    assert client.get("/api/me").json()["total_points"] == 1


def test_profile_page(client):
    client.post("/api/challenges/predefined_30day_water/join")

    resp = client.get("/profile")
    assert resp.status_code == 200
    assert "30-Day Hydration Challenge" in resp.text


def test_challenge_page(client):
    client.post("/api/challenges/predefined_7day_meditation/join")

    resp = client.get("/challenge/predefined_7day_meditation")
    assert resp.status_code == 200
    assert "You" in resp.text


def test_missing_challenge_page_redirects(client):
    resp = client.get("/challenge/nope", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers.get("location") == "/dashboard"


def test_pages_extend_base_template():
    """
    Guardrail: every page template extends base.html so the nav and
    balance header render everywhere.
    """
    assert TEMPLATE_DIR.exists(), "templates directory not found"

    offenders: list[str] = []
    for root, _dirs, files in os.walk(TEMPLATE_DIR):
        for name in files:
            if not name.endswith(".html") or name == "base.html":
                continue
            text = (Path(root) / name).read_text(encoding="utf-8")
            if '{% extends "base.html" %}' not in text:
                offenders.append(name)

    assert not offenders, "Templates not extending base.html:\n" + "\n".join(offenders)
