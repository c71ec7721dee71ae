"""Package data types shared by the manager and its integrations."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_PACKAGE_TYPE = "library"
PENDING_PACKAGE_TYPE = "unknown"
PENDING_DESCRIPTION = "Not yet installed."


@dataclass(frozen=True)
class RequirementEntry:
    """One declared (name, version constraint) pair from the manifest."""

    name: str
    constraint: str


def parse_requirements(manifest_data: Mapping[str, Any] | None) -> list[RequirementEntry]:
    """Extract requirements from manifest data in declaration order.

    Returns an empty list when the manifest has no usable "require" mapping.
    """
    if not manifest_data:
        return []
    requires = manifest_data.get("require")
    if not isinstance(requires, Mapping):
        return []
    return [RequirementEntry(name=str(name), constraint=str(c)) for name, c in requires.items()]


class Author(BaseModel):
    """Package author as reported by the toolchain."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    homepage: str | None = None
    role: str | None = None


class PackageInfo(BaseModel):
    """Metadata for an installed package."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    type: str | None = None
    pretty_version: str = Field(alias="prettyVersion")
    description: str | None = None
    authors: list[Author] | None = None
    keywords: list[str] | None = None


class InstalledPackageRecord(BaseModel):
    """One entry of the installed package list returned by the show action."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    package: PackageInfo
    version_pretty: str = Field(alias="versions")


class PackageStatus(StrEnum):
    INSTALLED = "installed"
    PENDING = "pending"


class PackageStatusEntry(BaseModel):
    """Unified status of one package, installed or pending.

    Serializes with camelCase keys (readmeLink, configLink, ...) so the
    output can be handed to JSON consumers as is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    status: PackageStatus
    type: str
    name: str
    title: str
    description: str | None
    version: str
    authors: list[Author] | None
    keywords: list[str] | None
    readme_link: str | None = None
    config_link: str | None = None
    repository_link: str | None = None
    constraint: str | None
    valid: bool
    enabled: bool

    @classmethod
    def installed(cls, record: InstalledPackageRecord, constraint: str) -> "PackageStatusEntry":
        package = record.package
        return cls(
            status=PackageStatus.INSTALLED,
            type=package.type or DEFAULT_PACKAGE_TYPE,
            name=package.name,
            title=package.name,
            description=None,
            version=package.pretty_version,
            authors=package.authors,
            keywords=package.keywords,
            constraint=constraint,
            valid=True,
            enabled=True,
        )

    @classmethod
    def pending(cls, requirement: RequirementEntry) -> "PackageStatusEntry":
        return cls(
            status=PackageStatus.PENDING,
            type=PENDING_PACKAGE_TYPE,
            name=requirement.name,
            title=requirement.name,
            description=PENDING_DESCRIPTION,
            version=requirement.constraint,
            authors=[],
            keywords=[],
            constraint=None,
            valid=False,
            enabled=False,
        )

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Override to use by_alias=True and JSON-compatible values by default."""
        kwargs.setdefault("by_alias", True)
        kwargs.setdefault("mode", "json")
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs: Any) -> str:
        """Override to use by_alias=True by default."""
        kwargs.setdefault("by_alias", True)
        return super().model_dump_json(**kwargs)
