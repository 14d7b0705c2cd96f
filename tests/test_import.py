"""Verify package imports work correctly."""


def test_import_sexpline() -> None:
    """Test that sexpline can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import sexpline

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert sexpline.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from sexpline import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_all_exports_resolve() -> None:
    """Every name in __all__ is importable from the package."""
    import sexpline

    for name in sexpline.__all__:
        assert hasattr(sexpline, name), name
