"""
tests/e2e/test_place_picker_apptest.py
Runs the whole app with Streamlit's AppTest against an unreachable backend:
both fetches fail, the screen shows error panels and nothing raises.
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[2] / "app.py")


def test_unreachable_backend_shows_error_panels(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PLACE_PICKER_APP_IMPORT_ONLY", raising=False)
    # Port 9 (discard) on loopback refuses connections
    monkeypatch.setenv("PLACE_PICKER_API_URL", "http://127.0.0.1:9")
    monkeypatch.setenv("PLACE_PICKER_TIMEOUT_S", "2")
    monkeypatch.setenv("PLACE_PICKER_SLUG", "apptest")

    at = AppTest.from_file(APP, default_timeout=30)
    at.run()

    assert not at.exception
    assert len(at.error) == 2
    controller = at.session_state["sync_controller"]
    assert controller.fetch_state.error is not None
    assert controller.picked == []
    assert (tmp_path / "artifacts" / "apptest" / "apptest_sync_log.jsonl").exists()
