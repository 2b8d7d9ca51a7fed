from __future__ import annotations

from relman.core.result import Err, Ok
from relman.output.console import MockConsole
from relman.services.release.progression import check_progression
from relman.services.release.semver import Version


def _check(version: Version, latest: str | None, *, force: bool = False, console: MockConsole | None = None):
    return check_progression(
        version=version,
        latest_tag=latest,
        force=force,
        console=console or MockConsole(),
    )


def test_first_release() -> None:
    console = MockConsole()
    result = _check(Version(0, 0, 1), None, console=console)
    assert result == Ok(None)
    assert console.find("This will be the first release")


def test_same_or_older_version_rejected() -> None:
    for version in (Version(1, 2, 3), Version(1, 2, 2), Version(0, 9, 9)):
        result = _check(version, "v1.2.3")
        assert isinstance(result, Err), version
        assert result.error.kind == "version_not_advanced"


def test_newer_versions_accepted() -> None:
    for version in (Version(1, 2, 4), Version(1, 3, 0), Version(2, 0, 0)):
        console = MockConsole()
        result = _check(version, "v1.2.3", console=console)
        assert result == Ok("v1.2.3")
        assert console.find(f"Upgrading from v1.2.3 to {version.tag}")
        assert not console.has_warning()


def test_same_version_message() -> None:
    result = _check(Version(1, 2, 3), "v1.2.3")
    assert isinstance(result, Err)
    assert "same as current version v1.2.3" in result.error.message


def test_force_downgrades_to_warning() -> None:
    for version in (Version(1, 2, 3), Version(1, 0, 0)):
        console = MockConsole()
        result = _check(version, "v1.2.3", force=True, console=console)
        assert result == Ok("v1.2.3")
        assert console.has_warning()
        assert console.find("Proceeding due to --force")


def test_unparsable_previous_tag_counts_as_zero() -> None:
    assert _check(Version(0, 0, 1), "nightly") == Ok("nightly")
    assert isinstance(_check(Version(0, 0, 0), "nightly"), Err)
