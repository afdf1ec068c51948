"""Test CLI functionality."""

import json
import sys
import uuid
from pathlib import Path
from unittest.mock import patch

import pytest
import tomlkit
from click.testing import CliRunner

from cmsfields.cli import cli, resolve_target
from cmsfields.errors import TargetException

SITE_MODULE = """
from cmsfields import list_field, page, post_type, select, option, title, url

collections = [
    post_type("articles", [title(), url("link")]),
    page("home", [title(), list_field("highlights")]),
]


def build():
    return page("contact", [select("topic", [option("sales"), option("support")])])
"""


@pytest.fixture(autouse=True)
def no_log_setup():
    with patch("cmsfields.cli.setup_log"):
        yield


@pytest.fixture
def site_module(tmp_path, monkeypatch):
    """Write an importable module building a small site configuration"""
    monkeypatch.setattr(sys, "path", list(sys.path))
    name = f"site_{uuid.uuid4().hex}"
    (tmp_path / f"{name}.py").write_text(SITE_MODULE)
    yield name
    sys.modules.pop(name, None)


def test_render_attribute(site_module, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", f"{site_module}:collections", "--app-dir", str(tmp_path)], obj={}
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[0]["folder"] == "src/content/articles"
    assert data[0]["fields"][1]["pattern"][1] == "Must be a valid URL"
    assert data[1]["file"] == "src/content/pages/home.yml"
    assert data[1]["fields"][1]["label_singular"] == "highlight"


def test_render_callable(site_module, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", f"{site_module}:build", "--app-dir", str(tmp_path)], obj={}
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["name"] == "contact"
    assert data["fields"][0]["options"][1] == {"value": "support", "label": "Support"}


def test_render_with_settings_file(site_module, tmp_path):
    settings_file = tmp_path / "cmsfields.toml"
    settings_file.write_text('posts_path = "content"\n')

    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "--config",
            str(settings_file),
            "render",
            f"{site_module}:collections",
            "--app-dir",
            str(tmp_path),
        ],
        obj={},
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["folder"] == "content/articles"


def test_render_invalid_target():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "no_colon_here"], obj={})

    assert result.exit_code != 0
    assert "Invalid target" in result.output


def test_render_missing_settings_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--config", str(tmp_path / "missing.toml"), "render", "json:dumps"], obj={}
    )

    assert result.exit_code != 0
    assert "not found" in result.output


def test_defaults_prints_toml():
    runner = CliRunner()
    result = runner.invoke(cli, ["defaults"], obj={})

    assert result.exit_code == 0, result.output
    doc = tomlkit.loads(result.output).unwrap()
    assert doc["slug"] == "{{slug}}"
    assert doc["url_revision"] == "later"
    assert doc["time_format"] is False


def test_defaults_with_settings_file(tmp_path):
    settings_file = tmp_path / "cmsfields.toml"
    settings_file.write_text('pages_folder = "static"\n')

    runner = CliRunner()
    result = runner.invoke(cli, ["-c", str(settings_file), "defaults"], obj={})

    assert result.exit_code == 0, result.output
    assert tomlkit.loads(result.output).unwrap()["pages_folder"] == "static"


class TestResolveTarget:
    """Tests for resolve_target function"""

    def test_resolve_module_attribute(self):
        assert resolve_target("cmsfields.consts:SLUG_TEMPLATE") == "{{slug}}"

    def test_resolve_dotted_attribute(self, site_module, tmp_path):
        result = resolve_target(f"{site_module}:build.__name__", app_dir=str(tmp_path))

        assert result == "build"

    def test_resolve_missing_module(self):
        with pytest.raises(TargetException) as exc_info:
            resolve_target("cmsfields_no_such_module:config")

        assert "Cannot import" in str(exc_info.value)

    def test_resolve_missing_attribute(self):
        with pytest.raises(TargetException) as exc_info:
            resolve_target("cmsfields.fields:no_such_builder")

        assert "no attribute" in str(exc_info.value)

    @pytest.mark.parametrize("target", ["cmsfields", ":field", "cmsfields:"])
    def test_resolve_malformed_target(self, target):
        with pytest.raises(TargetException):
            resolve_target(target)

    def test_app_dir_is_prepended(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "path", list(sys.path))

        with pytest.raises(TargetException):
            resolve_target("cmsfields_absent:x", app_dir=str(tmp_path))

        assert sys.path[0] == str(Path(tmp_path).resolve())


def test_defaults_invalid_environment(monkeypatch):
    monkeypatch.setenv("CMSFIELDS_URL_REVISION", "bogus")

    runner = CliRunner()
    result = runner.invoke(cli, ["defaults"], obj={})

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "url_revision" in result.output


def test_render_invalid_environment(monkeypatch):
    monkeypatch.setenv("CMSFIELDS_URL_REVISION", "bogus")

    runner = CliRunner()
    result = runner.invoke(cli, ["render", "cmsfields.consts:SLUG_TEMPLATE"], obj={})

    assert result.exit_code == 1
    assert "Settings validation failed" in result.output
