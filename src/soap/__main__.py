"""CLI entry point for soap."""

import sys

import click

from soap.parser import parse_args
from soap.render import iter_rows

_ARGV_KEY = "soap.argv"


class RawArgsCommand(click.Command):
    """A command that hands every token, ``--`` included, to soap.parser untouched."""

    def main(self, *args, **kwargs):
        # No shell-style glob expansion on Windows; "-c *" must stay "*".
        kwargs.setdefault("windows_expand_args", False)
        return super().main(*args, **kwargs)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[_ARGV_KEY] = list(args)
        return []


@click.command(cls=RawArgsCommand, context_settings={"help_option_names": []})
@click.pass_context
def main(ctx: click.Context) -> None:
    """Draw a text pyramid."""
    result = parse_args(ctx.meta[_ARGV_KEY])
    for message in result.messages:
        click.echo(message)
    if result.aborted:
        sys.exit(result.exit_code)

    for line in iter_rows(result.config):
        click.echo(line)


if __name__ == "__main__":
    main()
