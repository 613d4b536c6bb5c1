"""Click command group for the ``logux-status`` console script.

Contents
--------
* :func:`cli` - root group with ``.env`` handling and ``--version``.
* :func:`cli_info` - print the metadata banner.
* :func:`cli_demo` - replay a scripted sync session through :func:`logux_status.log`.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
from click.core import ParameterSource

from . import __init__conf__
from . import config as config_module
from .adapters import MemoryClient, MemorySync, RichConsoleSink
from .application.ports.sync import CLIENT_ERROR_EVENT, DEBUG_EVENT, ERROR_EVENT
from .domain import SyncError
from .logux_status import log, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_TOGGLES = ("state", "error", "add", "clean", "color")


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool, version: bool) -> None:
    """Print synchronization client events to the console."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--state/--no-state", default=True, help="Show connection state changes.")
@click.option("--error/--no-error", default=True, help="Show errors.")
@click.option("--add/--no-add", default=True, help="Show added actions.")
@click.option("--clean/--no-clean", default=True, help="Show cleaned actions.")
@click.option("--color/--no-color", default=True, help="Style output when the terminal supports it.")
@click.option("--url", default="ws://localhost:31337", show_default=True, help="Server address shown while connecting.")
@click.pass_context
def cli_demo(ctx: click.Context, url: str, **toggles: bool) -> None:
    """Replay a short client session and print its events.

    Toggles left at their defaults may be overridden with ``LOGUX_STATUS_*``
    environment variables.
    """

    messages = config_module.messages_from_env()
    explicit = {
        key: value for key, value in toggles.items() if ctx.get_parameter_source(key) is not ParameterSource.DEFAULT
    }
    messages = messages.replace(**explicit)

    sync = MemorySync("demo:client", remote_node_id="server:main", connection_url=url)
    unbind = log(MemoryClient(sync), messages, console=RichConsoleSink())
    try:
        _replay_session(sync)
    finally:
        unbind()


def _replay_session(sync: MemorySync) -> None:
    sync.set_state("connecting")
    sync.connected = True
    sync.set_state("sending")
    sync.set_state("synchronized")
    sync.log.add({"type": "user/rename", "name": "Alice"}, {"reasons": ["demo"]})
    sync.log.add({"type": "chat/message", "text": "hi"}, {"id": "2 server:main 0", "reasons": ["demo"]})
    sync.emit(CLIENT_ERROR_EVENT, SyncError("wrong-format"))
    sync.emit(ERROR_EVENT, SyncError("timeout", type="timeout", received=True))
    sync.emit(DEBUG_EVENT, "error", "Error: bad action\n    at server.js:10:5")
    sync.log.remove_reason("demo")
    sync.connected = False
    sync.set_state("disconnected")


def main(argv: Sequence[str] | None = None) -> int:
    """Run :func:`cli` without letting Click call ``sys.exit``.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.exceptions.Exit as exc:
        return int(exc.exit_code)
    return int(result or 0)


__all__ = ["cli", "main"]
