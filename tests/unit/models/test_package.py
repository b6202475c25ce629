import pytest

from advisory_audit.exceptions import ValidationError
from advisory_audit.models import Lockfile, Package


def test_package_purl():
    assert Package("serde", "1.0.130").purl == "pkg:cargo/serde@1.0.130"


def test_package_from_dict():
    package = Package.from_dict({"name": "foo", "version": "1.0.0", "source": "registry"})
    assert package == Package("foo", "1.0.0", source="registry")
    assert package.to_dict() == {
        "name": "foo",
        "version": "1.0.0",
        "source": "registry",
        "purl": "pkg:cargo/foo@1.0.0",
    }


def test_package_from_dict_falls_back_to_purl():
    package = Package.from_dict({"purl": "pkg:cargo/serde@1.0.130"})
    assert package == Package("serde", "1.0.130")


def test_package_from_dict_rejects_bad_purl():
    with pytest.raises(ValidationError, match="Invalid package URL"):
        Package.from_dict({"purl": "serde"})


def test_package_from_dict_requires_version():
    with pytest.raises(ValidationError):
        Package.from_dict({"name": "foo"})


def test_lockfile_dependency_count(lockfile):
    assert lockfile.dependency_count == 3
    assert Lockfile().dependency_count == 0


def test_lockfile_from_dict_preserves_order():
    lockfile = Lockfile.from_dict({"packages": [
        {"name": "b", "version": "1.0.0"},
        {"name": "a", "version": "2.0.0"},
    ]})
    assert [p.name for p in lockfile.packages] == ["b", "a"]


def test_lockfile_from_dict_rejects_non_list():
    with pytest.raises(ValidationError, match="must be a list"):
        Lockfile.from_dict({"packages": {"name": "a"}})
