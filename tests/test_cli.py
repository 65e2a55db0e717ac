# tests/test_cli.py

import json
from appseed.cli import main
from appseed.storage import SQLiteStorage


def test_cli_seeds_default_app(tmp_path):
    db = str(tmp_path / "apps.db")
    assert main(["--db", db]) == 0
    assert main(["--db", db]) == 0

    s = SQLiteStorage(db)
    apps = s.list_apps()
    s.close()
    assert [a.id for a in apps] == ["eff83ce8bd790069"]


def test_cli_payload_file(tmp_path, app_doc):
    p = tmp_path / "app.json"
    p.write_text(json.dumps(dict(app_doc, _id="abc", key=7)), encoding="utf-8")
    assert main(["--provider", "memory", "--payload", str(p)]) == 0


def test_cli_invalid_payload_exits_nonzero(tmp_path, app_doc):
    p = tmp_path / "app.json"
    del app_doc["secret"]
    p.write_text(json.dumps(app_doc), encoding="utf-8")
    assert main(["--provider", "memory", "--payload", str(p)]) == 1


def test_cli_unreachable_store_exits_nonzero(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert main(["--db", str(blocker / "apps.db")]) == 1


def test_cli_unknown_provider_from_env_exits_nonzero(monkeypatch, caplog):
    monkeypatch.setenv("APPSEED_STORAGE_PROVIDER", "mongo")
    assert main([]) == 1
    assert "Unknown storage provider" in caplog.text
