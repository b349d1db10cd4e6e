import os

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def pyproject():
    tomllib = pytest.importorskip("tomllib")
    with open(os.path.join(ROOT, "pyproject.toml"), "rb") as f:
        return tomllib.load(f)


def test_long_description_is_not_the_requirements_document(pyproject):
    readme = pyproject["project"].get("readme")
    assert readme not in ("spec.md", "SPEC_FULL.md", "DESIGN.md")
    if readme is not None:
        assert os.path.exists(os.path.join(ROOT, readme))


def test_declared_modules_exist(pyproject):
    setuptools_cfg = pyproject["tool"]["setuptools"]
    for module in setuptools_cfg["py-modules"]:
        assert os.path.exists(os.path.join(ROOT, module + ".py")), module
    for package in setuptools_cfg["packages"]:
        assert os.path.isdir(os.path.join(ROOT, package)), package


def test_console_script_points_at_cli(pyproject):
    assert pyproject["project"]["scripts"]["zbus-xmlgen"] == "zbus_xmlgen:main"
