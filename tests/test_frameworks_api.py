import json
import uuid
from types import SimpleNamespace

from skillframe.models import Competency, SubCompetency
from tests.utils import create_competency, create_role, create_role_level, create_sub

MARKDOWN_DOC = """# 1. Craft
Builds things well.

## 1.1 Design
### P1 Entry
- Follows existing patterns
### Senior
- Designs services end to end

# 2. Delivery
## 2.1 Planning
### p2
- Breaks work into tasks
"""


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}

    db = client.get("/api/db/health")
    assert db.json() == {"status": "ok", "db": "connected"}


def test_levels_fall_back_to_defaults_until_seeded(client, session_factory):
    db = session_factory()
    role = create_role(db, type="management")
    role_id = str(role.id)
    db.close()

    res = client.get(f"/api/roles/{role_id}/levels")
    assert res.status_code == 200
    body = res.json()
    assert body["source"] == "default"
    assert [lvl["key"] for lvl in body["levels"]] == ["m1_team_lead", "m2_manager", "m3_director", "m4_senior_director"]
    assert [lvl["base_score"] for lvl in body["levels"]] == [2, 4, 6, 8]
    assert body["max_chart_scale"] == 12

    seeded = client.post(f"/api/roles/{role_id}/levels/seed")
    assert seeded.status_code == 200
    assert seeded.json()["seeded"] is True

    again = client.post(f"/api/roles/{role_id}/levels/seed")
    assert again.json() == {"message": "Levels already exist for this role", "count": 4, "seeded": False}

    assert client.get(f"/api/roles/{role_id}/levels").json()["source"] == "stored"


def test_levels_unknown_role_returns_not_found(client):
    res = client.get(f"/api/roles/{uuid.uuid4()}/levels")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_request_validation_errors_use_error_envelope(client, session_factory):
    db = session_factory()
    role = create_role(db)
    role_id = str(role.id)
    db.close()

    res = client.post(f"/api/roles/{role_id}/levels/seed", params={"role_type": "intern"})
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"

    empty = client.post(f"/api/roles/{role_id}/framework/import", json={"content": ""})
    assert empty.status_code == 422
    assert empty.json()["error"]["code"] == "VALIDATION_ERROR"


def test_import_markdown_then_export(client, session_factory):
    db = session_factory()
    role = create_role(db)
    role_id = role.id
    db.close()

    res = client.post(f"/api/roles/{role_id}/framework/import", json={"content": MARKDOWN_DOC})
    assert res.status_code == 201
    assert res.json() == {
        "role_id": str(role_id),
        "format": "markdown",
        "competencies_created": 2,
        "sub_competencies_created": 2,
    }

    db = session_factory()
    design = db.query(SubCompetency).filter(SubCompetency.title == "Design").one()
    assert design.level_criteria == {
        "p1_entry": ["Follows existing patterns"],
        "p3_career": ["Designs services end to end"],
    }
    titles = [c.title for c in db.query(Competency).order_by(Competency.order_index)]
    assert titles == ["Craft", "Delivery"]
    db.close()

    md = client.get(f"/api/roles/{role_id}/framework/export", params={"format": "markdown"})
    assert md.status_code == 200
    assert md.headers["content-type"].startswith("text/markdown")
    assert md.text.startswith("# 1. Craft\n\nBuilds things well.")
    assert "## 2.1 Planning\n\n### P2 Developing\n- Breaks work into tasks" in md.text

    js = client.get(f"/api/roles/{role_id}/framework/export", params={"format": "json"})
    assert js.status_code == 200
    payload = json.loads(js.text)
    assert [c["title"] for c in payload["competencies"]] == ["Craft", "Delivery"]
    assert payload["competencies"][1]["subCompetencies"][0]["level_criteria"] == {"p2_developing": ["Breaks work into tasks"]}


def test_import_appends_after_existing_competencies(client, session_factory):
    db = session_factory()
    role = create_role(db)
    create_competency(db, role, title="Existing", order_index=3)
    role_id = role.id
    db.close()

    doc = {"competencies": [{"title": "Added", "subCompetencies": []}]}
    res = client.post(f"/api/roles/{role_id}/framework/import", json={"content": json.dumps(doc)})
    assert res.status_code == 201
    assert res.json()["format"] == "json"

    db = session_factory()
    added = db.query(Competency).filter(Competency.title == "Added").one()
    assert added.order_index == 4
    db.close()


def test_preview_does_not_write(client, session_factory):
    db = session_factory()
    role = create_role(db)
    role_id = role.id
    db.close()

    res = client.post(f"/api/roles/{role_id}/framework/preview", json={"content": MARKDOWN_DOC})
    assert res.status_code == 200
    body = res.json()
    assert body["format"] == "markdown"
    assert [c["title"] for c in body["document"]["competencies"]] == ["Craft", "Delivery"]

    db = session_factory()
    assert db.query(Competency).count() == 0
    db.close()


def test_import_error_codes(client, session_factory):
    db = session_factory()
    role = create_role(db)
    role_id = role.id
    db.close()

    blank = client.post(f"/api/roles/{role_id}/framework/import", json={"content": "   "})
    assert blank.status_code == 422
    assert blank.json()["error"]["code"] == "IMPORT_EMPTY_DOCUMENT"

    no_headings = client.post(f"/api/roles/{role_id}/framework/import", json={"content": "just some notes\n- a bullet"})
    assert no_headings.status_code == 422
    assert no_headings.json()["error"]["code"] == "IMPORT_NO_COMPETENCIES"

    bad_json = client.post(f"/api/roles/{role_id}/framework/import", json={"content": "{not json"})
    assert bad_json.status_code == 422
    assert bad_json.json()["error"]["code"] == "IMPORT_INVALID_JSON"

    db = session_factory()
    assert db.query(Competency).count() == 0
    db.close()


def test_export_unsupported_format(client, session_factory):
    db = session_factory()
    role = create_role(db)
    role_id = role.id
    db.close()

    res = client.get(f"/api/roles/{role_id}/framework/export", params={"format": "xml"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "EXPORT_UNSUPPORTED_FORMAT"


def test_export_uses_stored_custom_levels(client, session_factory):
    db = session_factory()
    role = create_role(db)
    create_role_level(db, role, key="apprentice", label="Apprentice", order_index=0)
    comp = create_competency(db, role, title="Craft")
    create_sub(db, comp, title="Design", level_criteria={"apprentice": ["Pairs on tasks"], "p5_principal": ["Sets direction"]})
    role_id = role.id
    db.close()

    res = client.get(f"/api/roles/{role_id}/framework/export")
    assert res.status_code == 200
    assert "### Apprentice\n- Pairs on tasks" in res.text
    # keys outside the role's registry are kept under their raw key
    assert "### p5_principal\n- Sets direction" in res.text


def test_criteria_for_legacy_only_sub(client, session_factory):
    db = session_factory()
    role = create_role(db)
    comp = create_competency(db, role, title="Craft")
    sub = create_sub(db, comp, title="Design", senior_level=["Designs services"])
    sub_id = sub.id
    db.close()

    res = client.get(f"/api/sub-competencies/{sub_id}/criteria/p3_career")
    assert res.status_code == 200
    assert res.json() == {"sub_competency_id": str(sub_id), "level_key": "p3_career", "criteria": ["Designs services"]}

    empty = client.get(f"/api/sub-competencies/{sub_id}/criteria/p1_entry")
    assert empty.json()["criteria"] == []

    missing = client.get(f"/api/sub-competencies/{uuid.uuid4()}/criteria/p1_entry")
    assert missing.status_code == 404


def test_run_migrations_inline(client, session_factory):
    db = session_factory()
    role = create_role(db)
    comp = create_competency(db, role, title="Craft")
    create_sub(db, comp, title="Design", intermediate_level=["Ships features"])
    db.close()

    before = client.get("/api/migrations/verify").json()
    assert before["passed"] is False
    assert len(before["issues"]) == 2

    res = client.post("/api/migrations/run")
    assert res.status_code == 200
    body = res.json()
    assert body["seed"]["roles_seeded"] == 1
    assert body["translate"]["subs_patched"] == 1
    assert body["verify"] == {"passed": True, "issues": [], "roles_checked": 1, "subs_checked": 1}

    criteria = client.get(f"/api/sub-competencies/{_only_sub_id(session_factory)}/criteria/intermediate")
    assert criteria.json()["criteria"] == ["Ships features"]


def test_migration_steps_are_idempotent_over_http(client, session_factory):
    db = session_factory()
    create_role(db)
    db.close()

    first = client.post("/api/migrations/from-legacy").json()
    assert first["message"] == "Migration complete. Seeded 1 roles, patched 0 sub-competencies."
    assert client.post("/api/migrations/seed-levels").json()["roles_seeded"] == 0
    assert client.post("/api/migrations/backfill-criteria").json()["subs_patched"] == 0
    assert client.post("/api/migrations/translate-keys").json()["subs_patched"] == 0


def test_run_migrations_in_background(client, monkeypatch):
    calls = []

    def fake_delay():
        calls.append(True)
        return SimpleNamespace(id="task-123")

    monkeypatch.setattr(
        "skillframe.tasks.migration_pipeline.run_migrations_task",
        SimpleNamespace(delay=fake_delay),
    )

    res = client.post("/api/migrations/run", params={"background": "true"})
    assert res.status_code == 202
    assert res.json()["task_id"] == "task-123"
    assert res.json()["status"] == "QUEUED"
    assert calls == [True]


def _only_sub_id(session_factory):
    db = session_factory()
    try:
        return db.query(SubCompetency).one().id
    finally:
        db.close()


def test_framework_health_endpoint(client, session_factory):
    db = session_factory()
    role = create_role(db, type="management")
    comp = create_competency(db, role, title="People")
    create_sub(db, comp, title="Hiring", level_criteria={"m1_team_lead": ["Runs interviews"], "m2_manager": ["Owns hiring plans"]})
    role_id = role.id
    db.close()

    res = client.get(f"/api/roles/{role_id}/framework/health")
    assert res.status_code == 200
    body = res.json()
    assert body["role_id"] == str(role_id)
    assert body["level_source"] == "default"
    assert body["status"] == "partial"
    assert body["level_slots"] == 4
    assert body["completion_pct"] == 50
    assert body["gaps"][0]["empty_levels"] == ["m3_director", "m4_senior_director"]

    missing = client.get(f"/api/roles/{uuid.uuid4()}/framework/health")
    assert missing.status_code == 404
