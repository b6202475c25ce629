import json

import pytest

from advisory_audit.config import load_settings
from advisory_audit.exceptions import ConfigurationError, ValidationError
from advisory_audit.models import Informational, Severity
from advisory_audit.report import Settings


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "audit.json"
    path.write_text(json.dumps({
        "target_os": "linux",
        "severity": "low",
        "ignore": ["ADV-001"],
        "informational_warnings": ["unmaintained"],
    }))
    return str(path)


def test_defaults_without_file_or_env():
    assert load_settings(env={}) == Settings()


def test_load_from_file(settings_file):
    settings = load_settings(settings_file, env={})
    assert settings.target_os == "linux"
    assert settings.severity is Severity.LOW
    assert settings.ignore == ("ADV-001",)
    assert settings.informational_warnings == (Informational.UNMAINTAINED,)


def test_file_from_environment(settings_file):
    settings = load_settings(env={"ADVISORY_AUDIT_CONFIG": settings_file})
    assert settings.target_os == "linux"


def test_environment_overrides_file(settings_file):
    env = {
        "ADVISORY_AUDIT_SEVERITY": "high",
        "ADVISORY_AUDIT_IGNORE": "ADV-002, ADV-003,",
        "ADVISORY_AUDIT_INFORMATIONAL_WARNINGS": "unsound",
        "ADVISORY_AUDIT_TARGET_ARCH": "x86_64",
    }
    settings = load_settings(settings_file, env=env)

    assert settings.target_os == "linux"
    assert settings.target_arch == "x86_64"
    assert settings.severity is Severity.HIGH
    assert settings.ignore == ("ADV-002", "ADV-003")
    assert settings.informational_warnings == (Informational.UNSOUND,)


def test_empty_list_variable_clears_file_value(settings_file):
    settings = load_settings(settings_file, env={"ADVISORY_AUDIT_IGNORE": ""})
    assert settings.ignore == ()


def test_missing_file():
    with pytest.raises(ConfigurationError, match="Settings file not found"):
        load_settings("/nonexistent/audit.json", env={})


def test_invalid_json(tmp_path):
    path = tmp_path / "audit.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_settings(str(path), env={})


def test_non_object_json(tmp_path):
    path = tmp_path / "audit.json"
    path.write_text("[]")
    with pytest.raises(ConfigurationError, match="JSON object"):
        load_settings(str(path), env={})


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "audit.json"
    path.write_text(json.dumps({"severity": "medium", "colour": "blue"}))

    settings = load_settings(str(path), env={})

    assert settings.severity is Severity.MEDIUM
    assert "colour" in caplog.text


def test_invalid_severity():
    with pytest.raises(ValidationError):
        load_settings(env={"ADVISORY_AUDIT_SEVERITY": "urgent"})
