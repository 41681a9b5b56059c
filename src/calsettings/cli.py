"""Command-line interface for the daily summary setting.

Lets an operator inspect and change a user's daily summary outside the chat
server, using the same store and timezone lookup the panel uses.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, NoReturn

import typer
import yaml

from calsettings.config import PanelConfig
from calsettings.dailysummary import DailySummarySetting
from calsettings.graph import create_timezone_provider
from calsettings.panel import SettingError
from calsettings.store import YamlSettingStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Daily summary settings CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "calsettings.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="Path to config.yaml")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
USER_ARGUMENT = typer.Argument(..., help="User id as known to the calendar")
VALUE_ARGUMENT = typer.Argument(..., help='Value such as "5:30PM UTC" or "true UTC"')
DISABLED_OPTION = typer.Option(
    False, "--disabled", help="Render as if a prerequisite setting were off"
)


def _build_setting(config: Path | None, debug: bool) -> tuple[DailySummarySetting, PanelConfig]:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        cfg = PanelConfig.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        _fail(str(exc))
    store = YamlSettingStore(cfg.store_path)
    return DailySummarySetting(store, create_timezone_provider(cfg)), cfg


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def render(
    user_id: str = USER_ARGUMENT,
    disabled: bool = DISABLED_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the panel attachment for a user as YAML."""
    setting, cfg = _build_setting(config, debug)
    try:
        attachment = setting.render(user_id, cfg.action_endpoint, disabled)
    except SettingError as exc:
        _fail(str(exc))
    typer.echo(yaml.safe_dump(attachment.to_slack(), sort_keys=False, allow_unicode=True))


@app.command("set")
def set_value(
    user_id: str = USER_ARGUMENT,
    value: str = VALUE_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Save a picker or toggle value for a user."""
    setting, _ = _build_setting(config, debug)
    try:
        setting.set(user_id, value)
    except SettingError as exc:
        _fail(str(exc))
    typer.secho(f"Saved {value!r} for {user_id}", fg=typer.colors.GREEN)


@app.command("get")
def get_value(
    user_id: str = USER_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the stored daily summary of a user."""
    setting, _ = _build_setting(config, debug)
    try:
        selection = setting.get(user_id)
    except SettingError as exc:
        _fail(str(exc))
    if selection is None:
        typer.echo("Not set.")
        return
    typer.echo(selection.summary())


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        PanelConfig.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
