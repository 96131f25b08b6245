from state import Coordinates
from utils.runtime import env_flag, load_settings

_VARS = [
    "PLACE_PICKER_API_URL",
    "PLACE_PICKER_TIMEOUT_S",
    "PLACE_PICKER_SLUG",
    "PLACE_PICKER_LAT",
    "PLACE_PICKER_LNG",
]


def _clear(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    s = load_settings()
    assert s.api_url == "http://localhost:3000"
    assert s.timeout_s == 10.0
    assert s.session_slug == "dev"
    assert s.reference_point is None


def test_env_overrides(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("PLACE_PICKER_API_URL", "http://api.example:8080/")
    monkeypatch.setenv("PLACE_PICKER_TIMEOUT_S", "2.5")
    monkeypatch.setenv("PLACE_PICKER_SLUG", "demo")
    monkeypatch.setenv("PLACE_PICKER_LAT", "52.52")
    monkeypatch.setenv("PLACE_PICKER_LNG", "13.405")
    s = load_settings()
    assert s.api_url == "http://api.example:8080"
    assert s.timeout_s == 2.5
    assert s.session_slug == "demo"
    assert s.reference_point == Coordinates(lat=52.52, lng=13.405)


def test_partial_or_invalid_location_is_ignored(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("PLACE_PICKER_LAT", "52.52")
    assert load_settings().reference_point is None
    monkeypatch.setenv("PLACE_PICKER_LNG", "east")
    assert load_settings().reference_point is None


def test_invalid_timeout_falls_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("PLACE_PICKER_TIMEOUT_S", "soon")
    assert load_settings().timeout_s == 10.0
    monkeypatch.setenv("PLACE_PICKER_TIMEOUT_S", "-1")
    assert load_settings().timeout_s == 10.0


def test_env_flag(monkeypatch):
    monkeypatch.setenv("PLACE_PICKER_APP_IMPORT_ONLY", " 1 ")
    assert env_flag("PLACE_PICKER_APP_IMPORT_ONLY")
    monkeypatch.setenv("PLACE_PICKER_APP_IMPORT_ONLY", "true")
    assert not env_flag("PLACE_PICKER_APP_IMPORT_ONLY")
