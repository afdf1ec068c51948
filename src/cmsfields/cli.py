"""CLI main entry point."""

import importlib
import json
import logging
import sys
from pathlib import Path

import click
import tomlkit

from .config import Settings, build_settings, configure
from .errors import CmsFieldsException, TargetException
from .log import setup as setup_log

logger = logging.getLogger(__name__)


def load_settings(config_path: str | None) -> Settings:
    """Load settings from file (or the environment only) and activate them."""
    if config_path:
        logger.info(f"Loading settings file: {config_path}")
        settings = Settings.load_from_file(config_path)
    else:
        settings = build_settings()

    configure(settings)
    return settings


def resolve_target(target: str, app_dir: str = "."):
    """Import ``package.module:attribute`` and return the object it names.

    Callable targets are called without arguments and their result returned,
    so both a built configuration and a function building one can be rendered.

    Args:
        target: Import path in ``module:attribute`` form, the attribute may be
            dotted
        app_dir: Directory prepended to ``sys.path`` before importing

    Returns:
        The resolved object

    Raises:
        TargetException: If the target is malformed or cannot be imported
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise TargetException(
            f"Invalid target: {target}. Expected format: package.module:attribute"
        )

    app_path = str(Path(app_dir).resolve())
    if app_path not in sys.path:
        sys.path.insert(0, app_path)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetException(f"Cannot import module {module_name}: {e}") from e

    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetException(
                f"Module {module_name} has no attribute {attr}"
            ) from e

    if callable(obj):
        logger.debug(f"Calling target {target}")
        obj = obj()

    return obj


@click.group()
@click.option("--config", "-c", default=None, help="Settings file path (TOML)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config: str | None, verbose: bool):
    """Build CMS configuration objects from Python."""
    setup_log(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command(name="defaults")
@click.pass_context
def defaults(ctx):
    """Print the effective builder defaults as TOML."""
    try:
        settings = load_settings(ctx.obj["config_path"])
        click.echo(tomlkit.dumps(settings.model_dump(mode="json")), nl=False)
    except CmsFieldsException as e:
        logger.error(f"Application error: {e}")
        raise click.ClickException(str(e))
    except Exception as e:
        logger.error(f"Program execution failed: {e}", exc_info=True)
        raise click.ClickException(str(e))


@cli.command(name="render")
@click.argument("target")
@click.option("--indent", default=2, type=int, help="JSON indentation")
@click.option(
    "--app-dir",
    default=".",
    help="Directory to import the target from",
)
@click.pass_context
def render(ctx, target: str, indent: int, app_dir: str):
    """Print the object built by TARGET (module:attribute) as JSON."""
    try:
        load_settings(ctx.obj["config_path"])
        obj = resolve_target(target, app_dir=app_dir)

        try:
            output = json.dumps(obj, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise TargetException(f"Target {target} is not serializable: {e}") from e

        click.echo(output)
    except CmsFieldsException as e:
        logger.error(f"Application error: {e}")
        raise click.ClickException(str(e))
    except Exception as e:
        logger.error(f"Program execution failed: {e}", exc_info=True)
        raise click.ClickException(str(e))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
