"""Verify package imports work correctly."""


def test_import_chesscli() -> None:
    """Test that chesscli can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import chesscli

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert chesscli.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from chesscli import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Everything in __all__ is importable from the package root."""
    import chesscli

    for name in chesscli.__all__:
        assert hasattr(chesscli, name), name
