"""Click command and group classes that know their own usage examples.

Pass ``examples=("create class Foo", ...)`` to ``@click.command`` or
``@group.command``; ``--examples`` then prints each one behind the full
command path and exits before any other option is processed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def format_examples(command_path: str, examples: Sequence[str]) -> str:
    """One ``  $ <command path> <args>`` line per example."""
    return "\n".join(f"  $ {command_path} {args}".rstrip() for args in examples)


class _ExamplesOption(click.Option):
    """Eager flag that prints the owning command's examples."""

    def __init__(self, examples: Sequence[str]) -> None:
        self.examples = tuple(examples)
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._print,
            help="Show usage examples and exit.",
        )

    def _print(self, ctx: click.Context, _param: click.Parameter, requested: bool) -> None:
        if requested and not ctx.resilient_parsing:
            path = ctx.command_path
            click.echo(f"Examples for '{path}':\n\n{format_examples(path, self.examples)}")
            ctx.exit(0)


class _WithExamples:
    examples: tuple[str, ...]
    params: list[click.Parameter]

    def _install_examples(self, examples: Sequence[str]) -> None:
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_ExamplesOption(self.examples))


class JcreateCommand(_WithExamples, click.Command):
    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class JcreateGroup(_WithExamples, click.Group):
    """Group whose subcommands are :class:`JcreateCommand` by default."""

    command_class = JcreateCommand

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)
