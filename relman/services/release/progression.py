from __future__ import annotations

from relman.core.result import Err, Ok, Result
from relman.output.console import ConsoleProtocol
from relman.services.release.errors import ReleaseError
from relman.services.release.semver import Version, compare, parse_tag_lenient


def check_progression(
    *,
    version: Version,
    latest_tag: str | None,
    force: bool,
    console: ConsoleProtocol,
) -> Result[str | None, ReleaseError]:
    """Require ``version`` to be newer than the latest tag.

    ``force`` turns both "same version" and "older version" into warnings.
    Returns the previous tag so the changelog can start from it.
    """
    if latest_tag is None:
        console.info("This will be the first release")
        return Ok(None)

    current = parse_tag_lenient(latest_tag)
    order = compare(version, current)

    if order == 0:
        message = f"Version {version} is the same as current version {latest_tag}"
        if not force:
            return Err(
                ReleaseError(
                    kind="version_not_advanced",
                    message=message,
                    hint="Use --force to proceed if this is intentional.",
                )
            )
        console.warning(f"{message}. Proceeding due to --force.")
    elif order < 0:
        message = f"New version {version.tag} is not greater than current version {latest_tag}"
        if not force:
            return Err(
                ReleaseError(
                    kind="version_not_advanced",
                    message=message,
                    hint="Use --force to proceed if this is intentional.",
                )
            )
        console.warning(f"{message}. Proceeding due to --force.")

    console.info(f"Upgrading from {latest_tag} to {version.tag}")
    return Ok(latest_tag)
