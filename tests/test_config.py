import pydantic
import pytest
import structlog
from studentstore.config import load_config


def test_load_config_defaults(monkeypatch):
    monkeypatch.delenv("studentstore_store_path", raising=False)
    config = load_config()
    assert config.store_path == "StudentsData"
    assert config.log_level == "info"
    assert config.log_format == "text"


def test_load_config_env(monkeypatch):
    monkeypatch.setenv("studentstore_store_path", "/tmp/elsewhere")
    assert load_config().store_path == "/tmp/elsewhere"


def test_load_config_override_beats_env(monkeypatch):
    monkeypatch.setenv("studentstore_store_path", "/tmp/elsewhere")
    assert load_config(store_path="here").store_path == "here"


def test_load_config_ignores_none_override(monkeypatch):
    monkeypatch.setenv("studentstore_store_path", "/tmp/elsewhere")
    assert load_config(store_path=None).store_path == "/tmp/elsewhere"


def test_load_config_json_log_file(tmp_path):
    log_file = tmp_path / "store.log"
    load_config(log_file=str(log_file), log_format="json", log_level="debug")
    structlog.get_logger().info("hello", key="value")
    contents = log_file.read_text()
    assert '"event": "hello"' in contents
    assert '"key": "value"' in contents
    load_config(log_level="info")


def test_load_config_log_level_case_insensitive():
    assert load_config(log_level="WARNING").log_level == "warning"
    load_config(log_level="info")


def test_load_config_invalid_log_level():
    with pytest.raises(pydantic.ValidationError):
        load_config(log_level="foo")
