from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from calsettings.cli import app

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        f"store_path: {tmp_path / 'settings.yaml'}\n"
        "default_timezone: America/Denver\n"
        "action_endpoint: /plugins/mscalendar/settings\n"
    )
    return path


def test_get_unset(config_path: Path) -> None:
    result = runner.invoke(app, ["get", "u1", "--config", str(config_path)])
    assert result.exit_code == 0
    assert "Not set." in result.output


def test_set_then_get(config_path: Path) -> None:
    result = runner.invoke(app, ["set", "u1", "9:15PM America/Denver", "--config", str(config_path)])
    assert result.exit_code == 0, result.output
    runner.invoke(app, ["set", "u1", "true America/Denver", "--config", str(config_path)])

    result = runner.invoke(app, ["get", "u1", "--config", str(config_path)])
    assert result.exit_code == 0
    assert "9:15PM (America/Denver) (Enabled)" in result.output


def test_set_invalid_value(config_path: Path) -> None:
    result = runner.invoke(app, ["set", "u1", "9:20PM UTC", "--config", str(config_path)])
    assert result.exit_code == 1


def test_render_outputs_attachment(config_path: Path) -> None:
    result = runner.invoke(app, ["render", "u1", "--config", str(config_path)])
    assert result.exit_code == 0, result.output
    attachment = yaml.safe_load(result.output)
    assert attachment["title"] == "Setting: Daily Summary"
    names = [a["name"] for a in attachment["actions"]]
    assert names == ["H:", "M:", "AM/PM:", "Enable"]
    assert attachment["actions"][0]["default_option"] == "8:00AM America/Denver"
    assert attachment["actions"][0]["integration"]["url"] == "/plugins/mscalendar/settings"


def test_render_disabled(config_path: Path) -> None:
    result = runner.invoke(app, ["render", "u1", "--disabled", "--config", str(config_path)])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output)["actions"] == []


def test_missing_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["get", "u1", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_config_validate(config_path: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["config", "validate", str(config_path)])
    assert result.exit_code == 0
    assert "Config valid" in result.output

    bad = tmp_path / "bad.yaml"
    bad.write_text("graph_timeout: -1\n")
    result = runner.invoke(app, ["config", "validate", str(bad)])
    assert result.exit_code == 1
