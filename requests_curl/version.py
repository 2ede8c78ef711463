"""
Version management for requests-curl.

This module provides version and git hash information.
It works in multiple scenarios:
1. Installed package: Reads the distribution metadata
2. Development mode: Reads from pyproject.toml and git
"""

import os
import subprocess
from importlib import metadata

DISTRIBUTION_NAME = "requests-curl"
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_version_info() -> tuple[str, str]:
    """Get version and git hash information.

    Returns:
        tuple: (version: str, git_hash: str)
    """
    version = "unknown"
    git_hash = "unknown"

    # First, try the metadata of the installed distribution
    try:
        version = metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        version = _read_pyproject_version()

    # Try to get git hash
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
            check=True,
            cwd=_PROJECT_ROOT,
        )
        git_hash = result.stdout.strip() or "unknown"
    except (OSError, subprocess.SubprocessError):
        pass

    return version, git_hash


def _read_pyproject_version() -> str:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib

    try:
        with open(os.path.join(_PROJECT_ROOT, "pyproject.toml"), "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return "unknown"
    return data.get("project", {}).get("version", "unknown")


def get_version() -> str:
    """Get version string.

    Returns:
        str: Version string or 'unknown' if not found
    """
    version, _ = get_version_info()
    return version


def get_git_hash() -> str:
    """Get current git commit hash (short version).

    Returns:
        str: Short git commit hash or 'unknown' if not available
    """
    _, git_hash = get_version_info()
    return git_hash


def get_version_string() -> str:
    """Get full version string with git hash.

    Returns:
        str: Version string in format 'version (git: hash)'
    """
    version, git_hash = get_version_info()
    return f"{version} (git: {git_hash})"
