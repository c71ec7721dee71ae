"""Tests for reconciliation of installed packages and manifest requirements."""

import json

import pytest

from extend_kit.actions.abc import ActionKind
from extend_kit.actions.fake import FakeExecutor, fake_action_registry
from extend_kit.context import ExtendContext, fake_settings
from extend_kit.manifest.fake import FakeManifestStore
from extend_kit.package_manager import PackageManager
from extend_kit.platform.fake import FakePlatformCompatibility
from extend_kit.types import Author, InstalledPackageRecord, PackageInfo, PackageStatus


def installed(name: str, version: str, **package_fields: object) -> InstalledPackageRecord:
    package = PackageInfo(name=name, prettyVersion=version, **package_fields)
    return InstalledPackageRecord(package=package, versions=f"{version}.0")


def build_manager(
    installed_records: list[InstalledPackageRecord],
    requires: dict[str, str],
    platform: FakePlatformCompatibility | None = None,
) -> tuple[PackageManager, dict[ActionKind, FakeExecutor]]:
    actions = fake_action_registry(show=installed_records)
    ctx = ExtendContext.for_test(
        settings=fake_settings(writeable=True),
        manifest=FakeManifestStore(data={"require": requires}),
        actions=actions,
        platform=platform,
    )
    return PackageManager(ctx), actions


def test_get_all_packages_serializes_installed_then_pending() -> None:
    platform = FakePlatformCompatibility(constraint="4.0.0 alpha 1")
    manager, _ = build_manager(
        [installed("test/installed-a", "1.2.3"), installed("test/installed-b", "2.4.6")],
        {"test/required-a": "^3.0", "test/required-b": "^4.0"},
        platform=platform,
    )

    packages = manager.get_all_packages()
    payload = json.loads(json.dumps({k: v.model_dump() for k, v in packages.items()}))

    def installed_entry(name: str, version: str) -> dict[str, object]:
        return {
            "status": "installed",
            "type": "library",
            "name": name,
            "title": name,
            "description": None,
            "version": version,
            "authors": None,
            "keywords": None,
            "readmeLink": None,
            "configLink": None,
            "repositoryLink": None,
            "constraint": "4.0.0 alpha 1",
            "valid": True,
            "enabled": True,
        }

    def pending_entry(name: str, version: str) -> dict[str, object]:
        return {
            "status": "pending",
            "type": "unknown",
            "name": name,
            "title": name,
            "description": "Not yet installed.",
            "version": version,
            "authors": [],
            "keywords": [],
            "readmeLink": None,
            "configLink": None,
            "repositoryLink": None,
            "constraint": None,
            "valid": False,
            "enabled": False,
        }

    assert payload == {
        "test/installed-a": installed_entry("test/installed-a", "1.2.3"),
        "test/installed-b": installed_entry("test/installed-b", "2.4.6"),
        "test/required-a": pending_entry("test/required-a", "^3.0"),
        "test/required-b": pending_entry("test/required-b", "^4.0"),
    }
    assert list(payload) == [
        "test/installed-a",
        "test/installed-b",
        "test/required-a",
        "test/required-b",
    ]
    assert list(payload["test/installed-a"]) == list(installed_entry("x", "1"))
    assert platform.queried == ["test/installed-a", "test/installed-b"]


def test_get_all_packages_mixed_scenario() -> None:
    manager, _ = build_manager(
        [installed("a", "1.2.3"), installed("c", "2.4.6")],
        {"a": "^3.0", "b": "^4.0"},
    )

    packages = manager.get_all_packages()

    assert list(packages) == ["a", "c", "b"]
    assert packages["a"].status is PackageStatus.INSTALLED
    assert packages["a"].version == "1.2.3"
    assert packages["a"].valid and packages["a"].enabled
    assert packages["c"].status is PackageStatus.INSTALLED
    assert packages["c"].valid and packages["c"].enabled
    assert packages["b"].status is PackageStatus.PENDING
    assert packages["b"].version == "^4.0"
    assert not packages["b"].valid and not packages["b"].enabled


def test_installed_status_wins_over_requirement() -> None:
    manager, _ = build_manager([installed("vendor/pkg", "1.0.0")], {"vendor/pkg": "^2.0"})

    packages = manager.get_all_packages()

    assert list(packages) == ["vendor/pkg"]
    assert packages["vendor/pkg"].status is PackageStatus.INSTALLED
    assert packages["vendor/pkg"].version == "1.0.0"


@pytest.mark.parametrize(
    ("installed_names", "required_names"),
    [
        ([], []),
        (["i/one"], []),
        ([], ["r/one", "r/two"]),
        (["i/one", "i/two", "i/three"], ["r/one", "r/two"]),
    ],
)
def test_disjoint_sets_produce_one_entry_each(
    installed_names: list[str], required_names: list[str]
) -> None:
    manager, _ = build_manager(
        [installed(name, "1.0.0") for name in installed_names],
        {name: "^1.0" for name in required_names},
    )

    packages = manager.get_all_packages()

    assert len(packages) == len(installed_names) + len(required_names)
    assert all(packages[n].status is PackageStatus.INSTALLED for n in installed_names)
    assert all(packages[n].status is PackageStatus.PENDING for n in required_names)


def test_get_all_packages_is_deterministic() -> None:
    manager, actions = build_manager(
        [installed("b/second", "2.0.0"), installed("a/first", "1.0.0")],
        {"z/last": "^1.0", "c/middle": "~2.1"},
    )

    first = manager.get_all_packages()
    second = manager.get_all_packages()

    assert list(first) == list(second) == ["b/second", "a/first", "z/last", "c/middle"]
    assert first == second
    assert len(actions[ActionKind.SHOW].calls) == 2


def test_get_all_packages_asks_show_action_for_installed_packages() -> None:
    manager, actions = build_manager([], {})

    manager.get_all_packages()

    assert actions[ActionKind.SHOW].calls == [("installed", "", "", False)]


def test_installed_package_metadata_passes_through() -> None:
    authors = [Author(name="Jo Maintainer", email="jo@example.com")]
    manager, _ = build_manager(
        [
            installed(
                "vendor/ext", "3.1.0", type="bolt-extension", authors=authors, keywords=["seo"]
            )
        ],
        {},
    )

    entry = manager.get_all_packages()["vendor/ext"]

    assert entry.type == "bolt-extension"
    assert entry.authors == authors
    assert entry.keywords == ["seo"]
    assert entry.description is None


def test_later_duplicate_installed_record_overwrites_earlier() -> None:
    manager, _ = build_manager(
        [installed("vendor/pkg", "1.0.0"), installed("vendor/pkg", "1.1.0")],
        {},
    )

    packages = manager.get_all_packages()

    assert list(packages) == ["vendor/pkg"]
    assert packages["vendor/pkg"].version == "1.1.0"


def test_closed_write_gate_reports_installed_packages_only() -> None:
    actions = fake_action_registry(show=[installed("vendor/pkg", "1.0.0")])
    ctx = ExtendContext.for_test(
        manifest=FakeManifestStore(data={"require": {"other/pkg": "^1.0"}}),
        actions=actions,
    )

    packages = PackageManager(ctx).get_all_packages()

    assert list(packages) == ["vendor/pkg"]
