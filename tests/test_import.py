"""Verify package imports work correctly."""


def test_import_mirador() -> None:
    """Test that mirador can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import mirador

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert mirador.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from mirador import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package."""
    import mirador

    for name in mirador.__all__:
        assert hasattr(mirador, name), name
