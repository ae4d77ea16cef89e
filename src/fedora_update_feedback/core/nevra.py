"""
RPM identifier parsing.

Handles package filenames as printed by ``dnf repoquery``
(``name-[epoch:]version-release.arch.ext``) and bare NVR strings as used by
Bodhi builds (``name-version-release``).

Names may contain ``-`` themselves, so every split works from the right and
must produce exactly the expected number of parts.
"""

import logging

from fedora_update_feedback.core.entities import PackageIdentifier
from fedora_update_feedback.core.errors import ParseError

logger = logging.getLogger(__name__)


def rsplit_exact(text: str, separator: str, parts: int) -> list[str]:
    """
    Split ``text`` from the right into exactly ``parts`` pieces.

    Args:
        text: String to split
        separator: Delimiter to split on
        parts: Required number of pieces

    Returns:
        Pieces in left-to-right order

    Raises:
        ParseError: If the string holds fewer delimiters than needed
    """
    pieces = text.rsplit(separator, parts - 1)
    if len(pieces) != parts:
        raise ParseError(
            f"Expected {parts} '{separator}'-separated parts in {text!r}, got {len(pieces)}",
            text,
        )
    return pieces


def _split_epoch(epoch_version: str) -> tuple[str, str]:
    if ":" in epoch_version:
        epoch, version = epoch_version.split(":", 1)
        return epoch, version
    return "0", epoch_version


def parse_nevra(nevra: str) -> PackageIdentifier:
    """
    Parse ``name-[epoch:]version-release.arch``.

    Examples:
        "foo-bar-1:2.3-4.fc40.x86_64" -> foo-bar, 1, 2.3, 4.fc40, x86_64
        "pkg-1.0-1.fc40.noarch" -> pkg, 0, 1.0, 1.fc40, noarch
    """
    nevr, arch = rsplit_exact(nevra, ".", 2)
    name, epoch_version, release = rsplit_exact(nevr, "-", 3)
    epoch, version = _split_epoch(epoch_version)

    return PackageIdentifier(
        name=name,
        epoch=epoch,
        version=version,
        release=release,
        arch=arch,
    )


def parse_filename(filename: str) -> PackageIdentifier:
    """Parse ``name-[epoch:]version-release.arch.ext``; the extension is dropped."""
    nevra, _extension = rsplit_exact(filename, ".", 2)
    return parse_nevra(nevra)


def parse_nvr(nvr: str) -> PackageIdentifier:
    """Parse a bare ``name-version-release`` string (no epoch, no arch)."""
    name, version, release = rsplit_exact(nvr, "-", 3)
    return PackageIdentifier(name=name, version=version, release=release)


def build_inventory(raw_output: str, strict: bool = True) -> frozenset[PackageIdentifier]:
    """
    Build the set of installed packages from package lister output.

    Args:
        raw_output: Newline-separated package filenames
        strict: Abort on the first malformed line instead of skipping it

    Returns:
        Set of installed package identifiers

    Raises:
        ParseError: If a line is malformed and ``strict`` is set
    """
    text = raw_output.strip()
    if not text:
        return frozenset()

    packages: set[PackageIdentifier] = set()

    for line in text.split("\n"):
        try:
            packages.add(parse_filename(line.strip()))
        except ParseError as e:
            if strict:
                raise
            logger.warning("Skipping unparseable package line %r: %s", line, e)

    logger.debug("Local inventory holds %d packages", len(packages))
    return frozenset(packages)
