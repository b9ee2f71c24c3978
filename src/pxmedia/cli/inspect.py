"""CLI command: pxmedia inspect -- display stylesheet structure."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from pxmedia.css import is_nested, parse_stylesheet
from pxmedia.errors import ParseError


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Parse a stylesheet and display its structure.

    Shows rule and at-rule counts, and which selectors sit inside at-rules
    (those are passed through untouched by convert).
    """
    css_path = Path(cssfile)

    try:
        stylesheet = parse_stylesheet(css_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    rules = list(stylesheet.walk_rules())
    nested = [r for r in rules if is_nested(r)]

    click.echo(f"Stylesheet: {css_path.name}")
    click.echo(f"Rules:      {len(rules)}")
    click.echo(f"At-rules:   {len(stylesheet.at_rules)}")
    click.echo(f"Nested:     {len(nested)}")

    if nested:
        click.echo()
        click.echo("Nested rules (skipped by convert):")
        for rule in nested:
            click.echo(f"  @{rule.parent.name} {rule.parent.params}  {rule.selector}")
