"""Package metadata, version banner and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from hiworld import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"
PACKAGE_DIR = PROJECT_ROOT / "src" / "hiworld"


def _load_project_table() -> dict[str, Any]:
    """Return the ``[project]`` table of pyproject.toml."""
    return cast(dict[str, Any], rtoml.load(PYPROJECT_PATH)["project"])


@pytest.mark.os_agnostic
def test_metadata_constants_match_pyproject() -> None:
    """Name, version and console script agree with the packaging file."""
    project = _load_project_table()

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert __init__conf__.shell_command in cast(dict[str, str], project["scripts"])


@pytest.mark.os_agnostic
def test_version_banner_format() -> None:
    """The banner reads '<command> version <version> (rev:<revision>)'."""
    assert __init__conf__.version_banner("abc1234") == f"hiworld version {__init__conf__.version} (rev:abc1234)"


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info lists every field, the revision only when given."""
    from hiworld import print_info

    print_info()
    without_revision = capsys.readouterr().out
    print_info(revision="abc1234")
    with_revision = capsys.readouterr().out

    assert without_revision.startswith("Info for hiworld:")
    assert "version" in without_revision
    assert "revision" not in without_revision
    assert "abc1234" in with_revision


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """The PEP 561 marker ships inside the package."""
    assert (PACKAGE_DIR / "py.typed").is_file()


@pytest.mark.os_agnostic
def test_default_config_ships_with_the_package() -> None:
    """The bundled defaults carry the greeting section."""
    defaults = rtoml.load(PACKAGE_DIR / "adapters" / "config" / "defaultconfig.toml")

    assert defaults["greeting"] == {"sink": "stdout", "default_name": "Youre"}
