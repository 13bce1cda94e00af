"""Minimal version helper for the rectgeom package."""

from importlib import metadata
from pathlib import Path

PACKAGE_NAME = "rectgeom"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev checkout
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        version = setuptools_scm.get_version(
            root=str(root), fallback_version=FALLBACK_VERSION
        )
        return str(version)


__all__ = ["get_version"]
