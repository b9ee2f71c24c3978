"""CLI command: pxmedia convert -- append media viewport blocks to a stylesheet."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from pxmedia.config import MediaViewportConfig, load_config
from pxmedia.css import parse_stylesheet, stringify
from pxmedia.errors import ParseError, PxMediaError
from pxmedia.transforms import apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write result here instead of stdout")
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), default=None, help="JSON file of options")
@click.option("--viewport-width", type=float, default=None, help="Design width in px (default 750)")
@click.option("--desktop-width", type=float, default=None, help="Desktop app width in px (default 600)")
@click.option("--landscape-width", type=float, default=None, help="Landscape app width in px (default 425)")
@click.option("--y-axis-break-point", type=float, default=None, help="Width breakpoint (default: desktop width)")
@click.option("--x-axis-break-point", type=float, default=None, help="Height breakpoint (default 640)")
@click.option("--root-class", default=None, help="Root container class name (default root-class)")
@click.option("--border", is_flag=True, help="Draw a border around the root container")
@click.option("--disable-desktop", is_flag=True, help="Skip the desktop media block")
@click.option("--disable-landscape", is_flag=True, help="Skip the landscape media block")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def convert(
    cssfile: str,
    output: str | None,
    config_file: str | None,
    viewport_width: float | None,
    desktop_width: float | None,
    landscape_width: float | None,
    y_axis_break_point: float | None,
    x_axis_break_point: float | None,
    root_class: str | None,
    border: bool,
    disable_desktop: bool,
    disable_landscape: bool,
    verbose: bool,
) -> None:
    """Append desktop and landscape media blocks to a stylesheet.

    Options given on the command line override those from --config.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    overrides = {
        "viewport_width": viewport_width,
        "desktop_width": desktop_width,
        "landscape_width": landscape_width,
        "y_axis_break_point": y_axis_break_point,
        "x_axis_break_point": x_axis_break_point,
        "root_class": root_class,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    # Flags can only switch a setting on; turning one off is left to --config.
    if border:
        overrides["border"] = True
    if disable_desktop:
        overrides["disable_desktop"] = True
    if disable_landscape:
        overrides["disable_landscape"] = True

    css_path = Path(cssfile)
    try:
        base = load_config(config_file) if config_file else MediaViewportConfig()
        config = MediaViewportConfig.from_options(overrides, base=base)
        stylesheet = parse_stylesheet(css_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Parse error in {css_path.name}{location}: {exc}", err=True)
        sys.exit(1)
    except PxMediaError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = stringify(apply_transforms(stylesheet, config))

    if output:
        Path(output).write_text(result, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result, nl=False)
