from __future__ import annotations

from pathlib import Path

from hashstore.paths import default_store_path
from hashstore.settings import get_settings


def test_defaults(monkeypatch, tmp_path):
    for name in ("HASHSTORE_BASE_DIR", "HASHSTORE_FILENAME", "HASHSTORE_JSON_INDENT", "HASHSTORE_DEBUG_LOG_VALUES"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    s = get_settings()
    assert s.base_dir == Path.cwd()
    assert s.store_filename == ".store.json"
    assert s.json_indent == 2
    assert s.debug_log_values is False
    assert default_store_path(s) == Path.cwd() / ".store.json"


def test_env_overrides(sandbox_dir, monkeypatch):
    monkeypatch.setenv("HASHSTORE_FILENAME", "kv.json")
    monkeypatch.setenv("HASHSTORE_JSON_INDENT", "4")
    monkeypatch.setenv("HASHSTORE_DEBUG_LOG_VALUES", "yes")

    s = get_settings()
    assert s.base_dir == sandbox_dir
    assert s.store_filename == "kv.json"
    assert s.json_indent == 4
    assert s.debug_log_values is True


def test_env_file_is_loaded(monkeypatch, tmp_path):
    # Registered with monkeypatch so the value load_dotenv sets is undone at teardown.
    monkeypatch.setenv("HASHSTORE_FILENAME", "placeholder")
    monkeypatch.delenv("HASHSTORE_FILENAME")
    env_file = tmp_path / "local.env"
    env_file.write_text("HASHSTORE_FILENAME=from-dotenv.json\n", encoding="utf-8")

    s = get_settings(env_file)
    assert s.store_filename == "from-dotenv.json"
