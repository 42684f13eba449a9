"""Verify package imports work correctly."""


def test_import_publication() -> None:
    """Test that publication can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import publication

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert publication.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from publication import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the top-level package."""
    import publication

    for name in publication.__all__:
        assert hasattr(publication, name), name
