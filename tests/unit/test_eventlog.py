import json
from pathlib import Path

from utils.eventlog import read_jsonl, sync_log, write_event_jsonl


def test_sync_log_writes_jsonl_under_slug_folder(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    out = sync_log("smoke_slug", {"event": "pick_applied", "count": 1})
    sync_log("smoke_slug", {"event": "pick_committed", "count": 1})
    p = Path(out)

    assert p.exists()
    assert p.name == "smoke_slug_sync_log.jsonl"
    assert p.parent.name == "smoke_slug"
    assert p.parent.parent.name == "artifacts"

    lines = p.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    obj = json.loads(lines[-1])
    assert obj["event"] == "pick_committed"
    assert obj["session_slug"] == "smoke_slug"


def test_sync_log_sanitizes_non_json_values(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    out = sync_log("s", {"event": "x", "obj": object()})
    obj = json.loads(Path(out).read_text(encoding="utf-8").splitlines()[-1])
    assert isinstance(obj["obj"], str)


def test_write_event_jsonl_never_raises_on_bad_payload(tmp_path):
    target = tmp_path / "log.jsonl"
    write_event_jsonl(str(target), {"bad": object()})
    assert not target.exists() or target.read_text(encoding="utf-8") == ""


def test_read_jsonl_skips_malformed_and_missing(tmp_path):
    p = tmp_path / "mixed.jsonl"
    p.write_text('{"a": 1}\nnot json\n\n[1, 2]\n{"b": 2}\n', encoding="utf-8")
    assert list(read_jsonl(str(p))) == [{"a": 1}, {"b": 2}]
    assert list(read_jsonl(str(tmp_path / "missing.jsonl"))) == []
