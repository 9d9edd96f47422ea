import json

from grepkit.settings import Settings


def test_settings_path(tmp_path):
    settings = Settings(tmp_path)
    assert settings.settings_path() == tmp_path / "settings.json"


def test_creates_missing_directory(tmp_path):
    target = tmp_path / "nested" / "dir"
    settings = Settings(target)
    assert target.is_dir()
    assert settings.error == ""


def test_defaults_without_file(tmp_path):
    settings = Settings(tmp_path)
    assert settings.sessions == []
    assert settings.patterns == {}
    assert settings.paths == []
    assert settings.style == ""
    assert settings.view_options == {}
    assert settings.editors == []


def test_round_trip(tmp_path):
    settings = Settings(tmp_path)
    settings.sessions = [{"path": "/tmp/project", "cacheFileList": True}]
    settings.patterns = {"include": ["foo", "bar"]}
    settings.paths = ["/tmp/project"]
    settings.style = "dark"
    settings.view_options = {"search": True, "cache": False}
    settings.editors = [{"exts": "txt", "app": "editor"}]
    settings.save()

    loaded = Settings(tmp_path)
    assert loaded.sessions == settings.sessions
    assert loaded.patterns == settings.patterns
    assert loaded.paths == settings.paths
    assert loaded.style == "dark"
    assert loaded.view_options == settings.view_options
    assert loaded.editors == settings.editors


def test_saved_file_keys(tmp_path):
    settings = Settings(tmp_path)
    settings.save()
    data = json.loads(settings.settings_path().read_text(encoding="utf-8"))
    assert sorted(data) == sorted(["editors", "sessions", "patterns", "paths", "style", "view"])


def test_invalid_json_keeps_defaults(tmp_path):
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
    settings = Settings(tmp_path)
    assert settings.sessions == []
    assert settings.style == ""


def test_non_object_keeps_defaults(tmp_path):
    (tmp_path / "settings.json").write_text("[1, 2]", encoding="utf-8")
    settings = Settings(tmp_path)
    assert settings.paths == []
    assert settings.patterns == {}


def test_wrong_types_become_empty(tmp_path):
    data = {"sessions": {}, "patterns": [], "paths": "x", "style": 5, "view": [], "editors": [1]}
    (tmp_path / "settings.json").write_text(json.dumps(data), encoding="utf-8")
    settings = Settings(tmp_path)
    assert settings.sessions == []
    assert settings.patterns == {}
    assert settings.paths == []
    assert settings.style == ""
    assert settings.view_options == {}
    assert settings.editors == [{}]