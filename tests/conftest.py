# tests/conftest.py

import pytest
from datetime import datetime, timezone

from advisory_audit.database import CommitInfo, InMemoryDatabase
from advisory_audit.models import Advisory, Lockfile, Package


def make_advisory(advisory_id, package, severity=None, informational=None, **kwargs):
    """Build an advisory record with sensible defaults for tests."""
    record = {
        "id": advisory_id,
        "package": package,
        "title": f"{advisory_id} in {package}",
        "severity": severity,
        "informational": informational,
    }
    record.update(kwargs)
    return Advisory.from_dict(record)


class FakeHistoryDatabase(InMemoryDatabase):
    """In-memory database reporting a fixed commit, without touching git."""

    def __init__(self, advisories, commit=None, **kwargs):
        super().__init__(advisories, **kwargs)
        self._commit = commit

    def latest_commit(self):
        return self._commit


@pytest.fixture
def lockfile():
    return Lockfile.from_packages([
        Package("foo", "1.0.0"),
        Package("bar", "0.3.1"),
        Package("baz", "2.2.0"),
    ])


@pytest.fixture
def advisories():
    return [
        make_advisory("ADV-001", "foo", severity="high"),
        make_advisory("ADV-002", "bar", severity="low"),
        make_advisory("ADV-003", "baz", severity="critical", versions={"patched": ["2.2.0"]}),
        make_advisory("ADV-010", "foo", informational="unmaintained"),
        make_advisory("ADV-011", "bar", informational="unsound"),
        make_advisory("ADV-012", "baz", informational="notice", severity="low"),
        make_advisory("ADV-013", "baz", informational="internal-tracking"),
    ]


@pytest.fixture
def database(advisories):
    return InMemoryDatabase(advisories)


@pytest.fixture
def commit():
    return CommitInfo(
        commit_id="0123456789abcdef0123456789abcdef01234567",
        timestamp=datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def history_database(advisories, commit):
    return FakeHistoryDatabase(advisories, commit=commit)
