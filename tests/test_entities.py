"""Tests for core entities."""

import dataclasses

import pytest

from fedora_update_feedback.core import Build, ClassificationResult, PackageIdentifier, ParseError, UpdateRecord


def test_package_identifier_creation() -> None:
    """Test creating a valid identifier."""
    package = PackageIdentifier(
        name="bash",
        version="5.2.26",
        release="3.fc40",
        epoch="0",
        arch="x86_64",
    )

    assert package.nvr == "bash-5.2.26-3.fc40"
    assert (package.epoch, package.arch) == ("0", "x86_64")


def test_package_identifier_defaults() -> None:
    package = PackageIdentifier(name="bash", version="5.2.26", release="3.fc40")

    assert package.epoch == "0"
    assert package.arch == ""


def test_package_identifier_validation() -> None:
    """Test identifier validation."""
    with pytest.raises(ParseError, match="name cannot be empty"):
        PackageIdentifier(name="", version="1", release="1")

    with pytest.raises(ParseError, match="version cannot be empty"):
        PackageIdentifier(name="a", version="", release="1")

    with pytest.raises(ParseError, match="release cannot be empty"):
        PackageIdentifier(name="a", version="1", release="")


def test_package_identifier_is_immutable() -> None:
    package = PackageIdentifier(name="a", version="1", release="1")

    with pytest.raises(dataclasses.FrozenInstanceError):
        package.version = "2"


def test_update_record_validation() -> None:
    with pytest.raises(ValueError, match="Alias cannot be empty"):
        UpdateRecord(alias="", user="packager", builds=(Build(nvr="a-1-1"),))


def test_classification_result_is_empty() -> None:
    assert ClassificationResult().is_empty
    assert not ClassificationResult(feedback_pending=["foo"]).is_empty
