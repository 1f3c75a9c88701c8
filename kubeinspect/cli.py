"""KubeInspect command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import yaml
from textual.logging import TextualHandler

from kubeinspect import __version__
from kubeinspect.behavior.manifest import ManifestCluster
from kubeinspect.errors import ObjectNotFoundError
from kubeinspect.models.state.config_manager import ConfigLoadError, ConfigManager
from kubeinspect.models.state.settings import InspectorSettings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Route logs to a file, or to the Textual devtools console without one.

    The terminal is owned by the TUI, so nothing is logged to stderr.
    """
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = TextualHandler()
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def parse_selection(value: str) -> tuple[str, str]:
    """Split ``KIND/NAME``.

    Raises:
        click.BadParameter: If the value is not of that form.
    """
    kind, sep, name = value.partition("/")
    if not sep or not kind or not name:
        raise click.BadParameter(f"expected KIND/NAME, got {value!r}", param_hint="--select")
    return kind, name


@click.command()
@click.argument(
    "manifests",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option("--select", "-s", "selection", help="Object to inspect at startup, as KIND/NAME.")
@click.option("--namespace", "-n", help="Only list objects in this namespace.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: ~/.config/kubeinspect/settings.json).",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file.",
)
@click.version_option(__version__, package_name="kubeinspect")
def main(
    manifests: tuple[Path, ...],
    selection: str | None,
    namespace: str | None,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """Inspect Kubernetes objects from MANIFESTS (files or directories).

    \b
    Examples:
      kubeinspect deploy.yaml pods.yaml
      kubeinspect ./manifests --select Deployment/web -n default
    """
    try:
        settings = ConfigManager.load(config_path)
    except ConfigLoadError as e:
        click.echo(f"Warning: {e}; using default settings", err=True)
        settings = InspectorSettings()

    log_path = log_file or (Path(settings.log_file).expanduser() if settings.log_file else None)
    configure_logging(log_level or settings.log_level, log_path)

    try:
        cluster = ManifestCluster.from_paths(manifests)
    except (OSError, yaml.YAMLError) as e:
        raise click.ClickException(f"Failed to load manifests: {e}") from e
    logger.info(f"Loaded {len(cluster)} objects from {len(manifests)} path(s)")

    selected = None
    if selection:
        kind, name = parse_selection(selection)
        try:
            selected = cluster.get(kind, name, namespace)
        except ObjectNotFoundError as e:
            raise click.BadParameter(str(e), param_hint="--select") from e

    from kubeinspect.app import InspectorApp

    InspectorApp(cluster, settings=settings, selected=selected, namespace=namespace).run()


__all__ = [
    "configure_logging",
    "main",
    "parse_selection",
]
