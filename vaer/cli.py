import asyncio
import inspect
import logging
from importlib import import_module
from pathlib import Path

import click
import structlog

structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
)


class AsyncAwareContext(click.Context):
    """
    A click context that invokes async functions with asyncio.run.
    """

    def invoke(self, *args, **kwargs):
        r = super().invoke(*args, **kwargs)
        if inspect.isawaitable(r):
            return asyncio.run(r)
        else:
            return r


click.Command.context_class = AsyncAwareContext


@click.group()
def cli() -> None:
    pass


def load_integrations(path: Path) -> None:
    """
    Register the `cli` group of every integration that has one.
    """
    for cli_module in path.glob("*/cli.py"):
        module_name = f"vaer.integrations.{cli_module.parent.name}.cli"

        module = import_module(module_name)
        if command := getattr(module, "cli", None):
            cli.add_command(command)


load_integrations(Path(__file__).parent / "integrations")
