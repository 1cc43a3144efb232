"""Verify package imports work correctly."""


def test_import_sclex() -> None:
    """Test that sclex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import sclex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert sclex.__version__ == expected


def test_version_format() -> None:
    from sclex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    import sclex

    for name in sclex.__all__:
        assert hasattr(sclex, name), name
