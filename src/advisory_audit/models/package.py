# advisory_audit/models/package.py

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from packageurl import PackageURL

from ..exceptions import ValidationError

# Ecosystem used when projecting packages to Package URLs
PURL_TYPE = "cargo"


@dataclass(frozen=True)
class Package:
    """Identity of one resolved package in a lockfile."""
    name: str
    version: str
    source: Optional[str] = None

    @property
    def purl(self) -> str:
        """Package URL for this package, e.g. ``pkg:cargo/serde@1.0.0``."""
        return PackageURL(type=PURL_TYPE, name=self.name, version=self.version).to_string()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Package":
        name = data.get("name")
        version = data.get("version")
        if (not name or not version) and data.get("purl"):
            try:
                purl = PackageURL.from_string(data["purl"])
            except ValueError as e:
                raise ValidationError(f"Invalid package URL: {data['purl']}") from e
            name = name or purl.name
            version = version or purl.version
        if not name or not version:
            raise ValidationError(
                "Package requires both 'name' and 'version'",
                details={"name": name, "version": version},
            )
        return cls(name=str(name), version=str(version), source=data.get("source"))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "version": self.version, "source": self.source, "purl": self.purl}
