"""CLI commands for rendering snapshots.

Provides `compositeviz graph` and `compositeviz timeline` as top-level commands.
Both write SVG by default; ``--json`` dumps the recorded draw commands instead
and ``--list`` prints them as a table.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Annotated

import typer

from compositeviz.cli._config import load_config
from compositeviz.cli._format import DRAW_COMMAND_HEADERS, draw_command_rows, print_json, print_lines, print_table
from compositeviz.cli.snapshot_cmd import load_snapshot
from compositeviz.exceptions import VisualizationConfigError


def _canvas_size(width: int | None, height: int | None) -> tuple[int, int]:
    """Explicit options win, then [tool.compositeviz], then defaults."""
    config = load_config()
    return width or config.width, height or config.height


def _rng(seed: int | None):
    if seed is None:
        seed = load_config().seed
    return random.Random(seed) if seed is not None else None


def _make_surface(recording: bool, width: int, height: int):
    from compositeviz.viz.surface import RecordingSurface, SvgSurface

    if recording:
        return RecordingSurface(width, height)
    return SvgSurface(width, height)


def _emit(command: str, surface, as_json: bool, as_list: bool, out: str | None) -> None:
    if as_list:
        lines = print_table(DRAW_COMMAND_HEADERS, draw_command_rows(surface.to_list()))
        print(f"{command} view: {surface.width}x{surface.height}, {len(surface.commands)} draw commands")
        print_lines(lines)
        return
    if as_json:
        print_json(command, {"width": surface.width, "height": surface.height, "commands": surface.to_list()}, out)
        return

    svg = surface.to_svg()
    if out:
        Path(out).write_text(svg)
        print(f"Wrote {command} view to {out} ({len(surface)} elements)")
    else:
        print(svg, end="")


def register_commands(app: typer.Typer) -> None:
    """Register `graph` and `timeline` as top-level commands on the app."""

    @app.command("graph")
    def graph_cmd(
        target: Annotated[str, typer.Argument(help="Snapshot as 'module:attr' or registered name")],
        width: Annotated[int | None, typer.Option("--width", help="Canvas width in pixels")] = None,
        height: Annotated[int | None, typer.Option("--height", help="Canvas height in pixels")] = None,
        seed: Annotated[int | None, typer.Option("--seed", help="Seed for processing-node placement")] = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output draw commands as JSON")] = False,
        as_list: Annotated[bool, typer.Option("--list", help="Print draw commands as a table")] = False,
        out: Annotated[str | None, typer.Option("--out", "-o", help="Write output to file")] = None,
    ):
        """Render the node-link diagram of a snapshot."""
        from compositeviz.viz.renderer import render_graph_view

        snapshot = load_snapshot(target)
        w, h = _canvas_size(width, height)
        surface = _make_surface(as_json or as_list, w, h)
        try:
            render_graph_view(snapshot, surface, rng=_rng(seed))
        except VisualizationConfigError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e
        _emit("graph", surface, as_json, as_list, out)

    @app.command("timeline")
    def timeline_cmd(
        target: Annotated[str, typer.Argument(help="Snapshot as 'module:attr' or registered name")],
        time: Annotated[float | None, typer.Option("--time", "-t", help="Playhead position in seconds")] = None,
        width: Annotated[int | None, typer.Option("--width", help="Canvas width in pixels")] = None,
        height: Annotated[int | None, typer.Option("--height", help="Canvas height in pixels")] = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output draw commands as JSON")] = False,
        as_list: Annotated[bool, typer.Option("--list", help="Print draw commands as a table")] = False,
        out: Annotated[str | None, typer.Option("--out", "-o", help="Write output to file")] = None,
    ):
        """Render the timeline of a snapshot."""
        from compositeviz.viz.renderer import render_timeline_view

        snapshot = load_snapshot(target)
        w, h = _canvas_size(width, height)
        surface = _make_surface(as_json or as_list, w, h)
        try:
            render_timeline_view(snapshot, surface, current_time=time)
        except VisualizationConfigError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e
        _emit("timeline", surface, as_json, as_list, out)
