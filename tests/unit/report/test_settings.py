import dataclasses

import pytest

from advisory_audit.exceptions import ValidationError
from advisory_audit.models import Informational, Severity
from advisory_audit.report import Settings


def test_default_settings_query_is_package_scope():
    query = Settings().query()
    assert query.include_informational is False
    assert query.target_arch_name is None
    assert query.target_os_name is None
    assert query.severity_threshold is None


def test_query_applies_only_set_filters():
    query = Settings(target_os="linux", severity=Severity.MEDIUM).query()
    assert query.target_os_name == "linux"
    assert query.target_arch_name is None
    assert query.severity_threshold is Severity.MEDIUM


def test_query_does_not_encode_ignore_or_informational():
    settings = Settings.build(ignore=["ADV-001"], informational_warnings=["unmaintained"])
    assert settings.query() == Settings().query()


def test_query_is_deterministic():
    settings = Settings.build(target_arch="x86_64", target_os="linux", severity="high")
    assert settings.query() == settings.query()


def test_build_normalizes_values():
    settings = Settings.build(
        target_arch="X86_64",
        severity="Critical",
        ignore=["ADV-001", "ADV-002"],
        informational_warnings=["Unmaintained", "internal-tracking"],
    )
    assert settings.target_arch == "x86_64"
    assert settings.severity is Severity.CRITICAL
    assert settings.ignore == ("ADV-001", "ADV-002")
    assert settings.informational_warnings == (Informational.UNMAINTAINED, "internal-tracking")


def test_build_rejects_string_lists():
    with pytest.raises(ValidationError, match="must be lists"):
        Settings.build(ignore="ADV-001")


def test_wants_warning_is_exact_match():
    settings = Settings.build(informational_warnings=["unmaintained"])
    assert settings.wants_warning(Informational.UNMAINTAINED)
    assert not settings.wants_warning(Informational.UNSOUND)
    assert not settings.wants_warning("unmaintained-ish")
    assert not settings.wants_warning(None)


def test_settings_round_trip():
    settings = Settings.build(target_os="linux", severity="low", ignore=["ADV-9"], informational_warnings=["notice"])
    data = settings.to_dict()
    assert data == {
        "target_arch": None,
        "target_os": "linux",
        "severity": "low",
        "ignore": ["ADV-9"],
        "informational_warnings": ["notice"],
    }
    assert Settings.from_dict(data) == settings


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Settings().ignore = ("ADV-1",)


def test_direct_construction_normalizes_values():
    """Plain strings passed to the constructor end up in the same form as build()."""
    settings = Settings(
        target_os="Linux",
        severity="medium",
        ignore=["ADV-1"],
        informational_warnings=("unmaintained",),
    )
    assert settings.target_os == "linux"
    assert settings.severity is Severity.MEDIUM
    assert settings.ignore == ("ADV-1",)
    assert settings.informational_warnings == (Informational.UNMAINTAINED,)
    assert settings.wants_warning(Informational.UNMAINTAINED)
    assert settings == Settings.build(
        target_os="linux", severity="medium", ignore=["ADV-1"], informational_warnings=["unmaintained"]
    )


def test_direct_construction_validates_values():
    with pytest.raises(ValidationError):
        Settings(severity="severe")
    with pytest.raises(ValidationError, match="must be lists"):
        Settings(informational_warnings="unmaintained")
