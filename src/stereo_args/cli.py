"""CLI entry point for stereo-args.

Usage:
    stereo-args parse left.tif right.tif left.tsai right.tsai run/out [dem.tif]
    stereo-args separate a.tif b.tif a.xml b.xml --equalize
    stereo-args value box2i 0,0,100,100
    stereo-args value point2i -- -1,2
    stereo-args parse a.tif b.tif run/out --left-image-crop-win "0 0 100 200"
    stereo-args classify a.tif a.tsai poly.shp
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from stereo_args import __version__
from stereo_args.core.config import load_config
from stereo_args.core.contracts import Box2I
from stereo_args.core.exceptions import ArgumentError
from stereo_args.core.logging import setup_logging
from stereo_args.core.option_values import VALUE_KINDS, parse_structured_value

app = typer.Typer(name="stereo-args", help="Positional argument and option value parsing for stereo tools")
console = Console()

DEFAULT_CONFIG = Path("stereo_args.yaml")
CROP_WIN_HELP = 'Crop window xoff,yoff,xsize,ysize, comma-joined or quoted ("0,0,100,200" or "0 0 100 200")'


def _fail(e: ArgumentError) -> None:
    console.print(f"[red]{str(e).rstrip()}[/red]")
    raise typer.Exit(1)


def value_parser(kind: str) -> Callable[[object], object]:
    """Build a typer ``parser=`` callable for the point or box named by ``kind``.

    Parse errors become ``typer.BadParameter`` so typer reports them as
    usage errors (exit code 2).
    """
    if kind not in VALUE_KINDS:
        raise ValueError(f"Unknown value kind: {kind}")

    def parse_value(value):
        if not isinstance(value, str):
            return value
        try:
            return parse_structured_value([value], kind)
        except ArgumentError as e:
            raise typer.BadParameter(str(e).rstrip())

    return parse_value


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"stereo-args {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Positional argument and option value parsing for stereo tools."""


@app.command()
def parse(
    tokens: List[str] = typer.Argument(..., help="<images> [<cameras>] <prefix> [<dem>]"),
    left_image_crop_win: Optional[Box2I] = typer.Option(
        None, parser=value_parser("box2i"), metavar="BOX", help=CROP_WIN_HELP
    ),
    right_image_crop_win: Optional[Box2I] = typer.Option(
        None, parser=value_parser("box2i"), metavar="BOX", help=CROP_WIN_HELP
    ),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Config path"),
) -> None:
    """Parse positional images, cameras, output prefix and DEM."""
    cfg = load_config(config)
    setup_logging(cfg.log_level)
    from stereo_args.core.positional import parse_multiview_cmd_files

    try:
        if cfg.configure_environment:
            from stereo_args.utils.environment import set_asp_env_vars

            set_asp_env_vars(cfg.deps_dir)
        parsed = parse_multiview_cmd_files(tokens)
    except ArgumentError as e:
        _fail(e)

    if cfg.write_run_log:
        from stereo_args.utils.run_log import log_to_file

        log_to_file(sys.argv, parsed.prefix)

    table = Table(title="Positional arguments")
    table.add_column("#", style="dim")
    table.add_column("Image", style="cyan")
    table.add_column("Camera", style="green")
    for i, image in enumerate(parsed.images):
        camera = parsed.cameras[i] if i < len(parsed.cameras) else "-"
        table.add_row(str(i + 1), image, camera)
    console.print(table)
    console.print(f"Output prefix: [yellow]{parsed.prefix}[/yellow]")
    console.print(f"DEM: [yellow]{parsed.dem_path or '-'}[/yellow]")
    for name, win in (("Left", left_image_crop_win), ("Right", right_image_crop_win)):
        if win is not None:
            console.print(f"{name} crop window: {win.model_dump_json()}")


@app.command()
def separate(
    paths: List[str] = typer.Argument(..., help="Images followed by cameras, or interleaved"),
    equalize: bool = typer.Option(False, help="Pad cameras with empty entries to match images"),
) -> None:
    """Split paths into images and cameras."""
    from stereo_args.core.separator import separate_images_from_cameras

    try:
        inputs = separate_images_from_cameras(paths, ensure_equal_sizes=equalize)
    except ArgumentError as e:
        _fail(e)
    console.print(inputs.model_dump_json(indent=2))


@app.command()
def value(
    kind: str = typer.Argument(..., help=f"One of: {', '.join(VALUE_KINDS)}"),
    raw_tokens: List[str] = typer.Argument(
        ..., help="Numbers separated by commas and/or spaces; put -- before a leading negative number"
    ),
) -> None:
    """Parse a point or box option value.

    Values starting with a minus sign must follow ``--``, e.g.
    ``stereo-args value point2i -- -1,2``.
    """
    try:
        parsed = parse_structured_value(raw_tokens, kind)
    except ArgumentError as e:
        _fail(e)
    console.print(parsed.model_dump_json())


@app.command()
def classify(paths: List[str] = typer.Argument(..., help="Paths to classify")) -> None:
    """Show the category of each path."""
    from stereo_args.core.paths import classify as classify_path

    table = Table(title="Path categories")
    table.add_column("Path", style="cyan")
    table.add_column("Category", style="green")
    for path in paths:
        table.add_row(path, classify_path(path).value)
    console.print(table)


if __name__ == "__main__":
    app()
