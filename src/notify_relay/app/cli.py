"""Command-line interface for notify-relay."""

from __future__ import annotations

import asyncio
import json
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import cast

import click

from notify_relay.config import ConfigError, RelayConfig, load_config, suggest_config_fix
from notify_relay.core.context import RelayContext
from notify_relay.plugins import register_default_handlers
from notify_relay.utils.logging import configure_logging

try:
    __version__ = version("notify-relay")
except PackageNotFoundError:
    __version__ = "unknown"


def validate_config_path(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: Path | None,
) -> Path | None:
    """Validate the configuration file path.

    Raises:
        click.BadParameter: If the path is a directory or not a YAML file
    """
    if value is None:
        return value

    if value.exists() and value.is_dir():
        raise click.BadParameter("Configuration path must be a file, not a directory")

    if value.suffix.lower() not in {".yaml", ".yml"}:
        raise click.BadParameter("Configuration file must be YAML (.yaml or .yml)")

    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize the log level override."""
    if value is None:
        return value

    normalized_value = value.upper().strip()
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if normalized_value not in valid_levels:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(valid_levels))}'
        )
    return normalized_value


def parse_payload(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str,
) -> object:
    """Decode the JSON payload option."""
    try:
        return cast(object, json.loads(value))
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Payload is not valid JSON: {e}")


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(path_type=Path),
    default=None,
    callback=validate_config_path,
    help="Configuration file. Defaults to notify-relay.yaml or config.yaml in the current directory.",
)
@click.option(
    "--log-level", "-l",
    type=str,
    default=None,
    callback=validate_log_level,
    help="Override the configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.version_option(version=__version__, prog_name="notify-relay")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, log_level: str | None) -> None:
    """Notify Relay - queue email, SMS and Telegram notifications.

    Examples:

        # Send an SMS and wait for the outcome
        notify-relay send sms --payload '{"to": "+35799999999", "message": "hi"}'

        # Poll a job submitted with the Redis store
        notify-relay --config relay.yaml status 3f0c2a8e-...
    """
    try:
        relay_config = load_config(config)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        suggestion = suggest_config_fix(e)
        if suggestion:
            click.echo(f"Hint: {suggestion}", err=True)
        ctx.exit(1)

    if log_level is not None:
        relay_config.logging.level = log_level  # pyright: ignore[reportAttributeAccessIssue] # validated by callback

    configure_logging(log_level=relay_config.logging.level, log_file=relay_config.logging.file)
    ctx.obj = relay_config


@cli.command()
@click.argument("service")
@click.option(
    "--payload", "-p",
    default="{}",
    callback=parse_payload,
    help="JSON request payload handed to the handler",
)
@click.option(
    "--wait/--no-wait",
    default=True,
    help="Print the final status record (the job is processed before exit either way)",
)
@click.pass_obj
def send(config: RelayConfig, service: str, payload: object, wait: bool) -> None:
    """Submit a notification to SERVICE (email, sms or telegram).

    The job is processed by this process before the command exits; with
    the redis store backend its record stays available to `status`.
    """
    for line in asyncio.run(_send(config, service, payload, wait)):
        click.echo(json.dumps(line))


async def _send(config: RelayConfig, service: str, payload: object, wait: bool) -> list[dict[str, object]]:
    context = RelayContext(config)
    _ = register_default_handlers(context.registry, config.handlers)
    try:
        router = await context.dispatch(service, payload)
        output: list[dict[str, object]] = [
            {"status": "in queue", "position": router.get_position(), "id": router.get_id()}
        ]
        if wait:
            await context.queue.join()
            record = await context.lookup_status(router.get_id())
            if record is not None:
                output.append(record.to_store())
        return output
    finally:
        await context.close()


@cli.command()
@click.argument("job_id")
@click.pass_obj
def status(config: RelayConfig, job_id: str) -> None:
    """Show the status record of JOB_ID.

    Records outlive the submitting process only with the redis store
    backend (store.backend: redis); the default memory store starts empty,
    so every lookup reports "Service not found.".
    """
    record = asyncio.run(_status(config, job_id))
    if record is None:
        raise click.ClickException("Service not found.")
    click.echo(json.dumps(record))


async def _status(config: RelayConfig, job_id: str) -> dict[str, object] | None:
    context = RelayContext(config)
    try:
        record = await context.lookup_status(job_id)
        return record.to_store() if record is not None else None
    finally:
        await context.close()
