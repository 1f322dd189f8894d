"""Smoke tests for package import and version."""

import regex_collection


def test_import_package() -> None:
    assert isinstance(regex_collection, object)


def test_version() -> None:
    assert regex_collection.__version__ == "0.1.0"


def test_top_level_exports() -> None:
    for name in regex_collection.__all__:
        assert hasattr(regex_collection, name), name
