import json
from familytree_py.config import load_config, Config


def test_defaults():
    cfg = load_config(None)
    assert cfg == Config()
    assert cfg.max_path_depth is None


def test_load_config_from_file(tmp_path, monkeypatch):
    cfgfile = tmp_path / "cfg.json"
    data = {"log_level": "debug", "max_path_depth": 12, "max_paths": 5}
    cfgfile.write_text(json.dumps(data))
    monkeypatch.setenv("FAMILYTREE_MAX_PATHS", "99")
    cfg = load_config(str(cfgfile))
    assert cfg.log_level == "DEBUG"
    assert cfg.max_path_depth == 12
    # explicit file wins over the environment
    assert cfg.max_paths == 5


def test_env_overrides(tmp_path, monkeypatch):
    cfgfile = tmp_path / "cfg.json"
    cfgfile.write_text(json.dumps({"max_paths": 5}))
    monkeypatch.setenv("FAMILYTREE_CONFIG", str(cfgfile))
    monkeypatch.setenv("FAMILYTREE_LOG_LEVEL", "warning")
    monkeypatch.setenv("FAMILYTREE_MAX_PATH_DEPTH", "7")
    cfg = load_config(None)
    assert cfg.log_level == "WARNING"
    assert cfg.max_path_depth == 7
    assert cfg.max_paths == 5


def test_unreadable_file_keeps_defaults(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert load_config(str(bad)) == Config()
    assert load_config(str(tmp_path / "missing.json")) == Config()


def test_bad_file_values_keep_defaults(tmp_path, caplog):
    cfgfile = tmp_path / "cfg.json"
    cfgfile.write_text(json.dumps({"log_level": "debug", "max_path_depth": "deep", "max_paths": [3]}))
    cfg = load_config(str(cfgfile))
    assert cfg.log_level == "DEBUG"
    assert cfg.max_path_depth is None
    assert cfg.max_paths == 100
    assert "max_path_depth" in caplog.text


def test_bad_env_values_keep_file_values(tmp_path, monkeypatch):
    cfgfile = tmp_path / "cfg.json"
    cfgfile.write_text(json.dumps({"max_path_depth": 4, "max_paths": 5}))
    monkeypatch.setenv("FAMILYTREE_CONFIG", str(cfgfile))
    monkeypatch.setenv("FAMILYTREE_MAX_PATHS", "lots")
    monkeypatch.setenv("FAMILYTREE_MAX_PATH_DEPTH", "deep")
    cfg = load_config(None)
    assert cfg.max_paths == 5
    assert cfg.max_path_depth == 4
