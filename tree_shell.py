"""Menu-driven shell over one OrderedTree.

Settings resolve, highest first: command-line flags, ``TREE_*`` environment
variables (a local ``.env`` is loaded into the environment when present),
then defaults. Logs go to stderr; stdout belongs to the menu.
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path
from typing import Any

import click
import structlog
from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from BST import OrderedTree

log = logging.getLogger(__name__)


# ───────────────────────────────────────────────
# SETTINGS (.env locally, plain environment otherwise)
# ───────────────────────────────────────────────

DEFAULT_INDENT = 10


def load_env_file(path=".env"):
    """Load `path` into os.environ when it exists. Existing variables win."""
    if Path(path).exists():
        load_dotenv(path)
        return True
    return False


class ShellSettings(BaseSettings):
    model_config = {
        "frozen": True,
        "env_prefix": "TREE_",
    }

    print_indent: int = Field(DEFAULT_INDENT, ge=0)
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ShellSettings:
        """Merge CLI flags over the environment.

        Unset flags (None, or False for switches) leave the environment value
        in place.
        """
        overrides = {k: v for k, v in cli_flags.items() if v is not None and v is not False}
        try:
            return cls(**overrides)
        except ValidationError as exc:
            err = exc.errors()[0]
            name = "TREE_" + str(err["loc"][0]).upper()
            raise click.BadParameter(f"{name}: {err['msg']}") from exc


# ───────────────────────────────────────────────
# LOGGING
# ───────────────────────────────────────────────

def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Render stdlib records from BST and the shell through structlog on stderr.

    Args:
        verbose: DEBUG for this project's loggers. When False, only WARNING+.
        log_json: JSON lines instead of the console renderer.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    level = logging.DEBUG if verbose else logging.WARNING
    for name in ("BST", "tree_shell"):
        logging.getLogger(name).setLevel(level)


# ───────────────────────────────────────────────
# MENU LOOP
# ───────────────────────────────────────────────

MENU = (
    "\n[1] Insert Node\n"
    "[2] Delete Node\n"
    "[3] Find a Node\n"
    "[4] Get current Height\n"
    "[5] Print Tree in Crescent Order\n"
    "[6] Print Tree\n"
    "[0] Quit"
)


def _read_key(prompt):
    return click.prompt(prompt, type=int)


def do_insert(tree):
    key = _read_key("Enter the new node's value")
    if not tree.insert(key):
        log.debug("duplicate %r ignored", key)


def do_delete(tree):
    if not tree:
        click.echo("Enter the value to be removed:")
        click.echo("Tree is already empty!")
        return
    key = _read_key("Enter the value to be removed")
    if not tree.remove(key):
        log.debug("remove of absent key %r", key)


def do_find(tree):
    key = _read_key("Enter the searched value")
    if tree.contains(key):
        click.echo("The value is in the tree.")
    else:
        click.echo("The value is not in the tree.")


def do_height(tree):
    click.echo(f"Current height of the tree is: {tree.height()}")


def do_in_order(tree):
    click.echo("".join(f"\t[ {key} ]\t" for key in tree.in_order()))


def do_print(tree, indent=DEFAULT_INDENT):
    click.echo(tree.render(indent))


ACTIONS = {
    1: do_insert,
    2: do_delete,
    3: do_find,
    4: do_height,
    5: do_in_order,
    6: do_print,
}


def run_shell(tree, indent=DEFAULT_INDENT):
    """Drive `tree` from the numeric menu until 0 or end of input.

    The tree is torn down on the way out.
    """
    actions = {**ACTIONS, 6: partial(do_print, indent=indent)}
    try:
        while True:
            click.echo(MENU)
            try:
                choice = click.prompt("Choice", type=int, prompt_suffix="> ")
            except click.Abort:
                log.debug("input closed")
                break

            if choice == 0:
                break

            action = actions.get(choice)
            if action is None:
                log.debug("unknown menu choice %d", choice)
                continue

            try:
                action(tree)
            except click.Abort:
                log.debug("input closed")
                break
    finally:
        released = tree.clear()
        log.debug("session finished, released %d nodes", released)


# ───────────────────────────────────────────────
# ENTRY POINT
# ───────────────────────────────────────────────

@click.command()
@click.option("--indent", type=int, default=None, help="Columns per level in the tree print.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--env-file", default=".env", show_default=True, help="Optional dotenv file.")
def main(indent, verbose, log_json, env_file):
    """Interactive shell over an unbalanced binary search tree."""
    load_env_file(env_file)
    settings = ShellSettings.from_cli(print_indent=indent, verbose=verbose, log_json=log_json)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    log.debug("shell started, indent %d", settings.print_indent)

    run_shell(OrderedTree(), settings.print_indent)


if __name__ == "__main__":
    main()
