"""Snapshot CLI commands: inspect, ls."""

from __future__ import annotations

import importlib
import sys
from typing import Annotated

import typer

from compositeviz.cli._config import load_config
from compositeviz.cli._format import format_seconds, print_json, print_lines, print_table

app = typer.Typer(help="Inspect graph snapshots.")


def _import_snapshot(module_path: str):
    """Import a GraphSnapshot from 'module:attribute' path.

    The attribute may be a GraphSnapshot or a zero-argument callable
    returning one.

    Examples:
        my_module:snapshot
        my_package.demo:build_snapshot
    """
    module_name, attr_name = module_path.rsplit(":", 1)

    try:
        if "." not in sys.path:
            sys.path.insert(0, ".")
        module = importlib.import_module(module_name)
    except ImportError as e:
        print(f"Error: Could not import module '{module_name}': {e}")
        raise typer.Exit(1) from e

    snapshot = getattr(module, attr_name, None)
    if snapshot is None:
        print(f"Error: Module '{module_name}' has no attribute '{attr_name}'")
        raise typer.Exit(1)

    from compositeviz.graph import GraphSnapshot

    if callable(snapshot) and not isinstance(snapshot, GraphSnapshot):
        snapshot = snapshot()

    if not isinstance(snapshot, GraphSnapshot):
        print(f"Error: '{module_path}' is not a GraphSnapshot (got {type(snapshot).__name__})")
        raise typer.Exit(1)

    return snapshot


def _load_from_registry(name: str):
    """Look up a snapshot name in [tool.compositeviz.snapshots] and import it."""
    config = load_config()
    module_path = config.snapshots.get(name)
    if module_path is None:
        print(f"Error: '{name}' not found in [tool.compositeviz.snapshots]")
        print("Hint: Use 'module:attribute' format or register in pyproject.toml:")
        print(f'  [tool.compositeviz.snapshots]\n  {name} = "my_module:snapshot"')
        raise typer.Exit(1)
    return _import_snapshot(module_path)


def load_snapshot(target: str):
    """Load a GraphSnapshot by module path ('module:attr') or registry name."""
    if ":" in target:
        return _import_snapshot(target)
    return _load_from_registry(target)


@app.command("ls")
def snapshot_ls(
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
):
    """List registered snapshots from [tool.compositeviz.snapshots]."""
    config = load_config()

    if as_json:
        print_json("snapshot.ls", {"snapshots": config.snapshots}, output)
        return

    if not config.snapshots:
        print("\n  No snapshots registered in pyproject.toml.")
        print("  Add entries under [tool.compositeviz.snapshots]:")
        print('    [tool.compositeviz.snapshots]\n    demo = "my_module:snapshot"')
        return

    headers = ["Name", "Module Path"]
    rows = [[name, path] for name, path in sorted(config.snapshots.items())]
    lines = print_table(headers, rows)

    print(f"\n  Registered snapshots ({len(config.snapshots)}):\n")
    print_lines(lines)


@app.command("inspect")
def snapshot_inspect(
    target: Annotated[str, typer.Argument(help="Snapshot as 'module:attribute' or registered name")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
):
    """Show snapshot structure and anything that will render oddly."""
    from compositeviz.viz.debug import VizDebugger

    snapshot = load_snapshot(target)
    debugger = VizDebugger(snapshot)
    result = debugger.find_issues()

    if as_json:
        data = debugger.debug_dump()
        data["errors"] = result.errors
        data["warnings"] = result.warnings
        print_json("snapshot.inspect", data, output)
        return

    print(
        f"\nSnapshot: {len(snapshot.source_nodes)} sources | "
        f"{len(snapshot.processing_nodes)} processing | "
        f"{len(snapshot.connections)} connections | duration {format_seconds(snapshot.duration)}\n"
    )

    headers = ["Node", "Kind", "Start", "Stop"]
    rows = []
    for node in snapshot.iter_nodes():
        start = getattr(node, "start_time", None)
        stop = getattr(node, "stop_time", None)
        rows.append([node.name or "—", node.kind.value, format_seconds(start), format_seconds(stop)])
    print_lines(print_table(headers, rows))

    for error in result.errors:
        print(f"\n  ERROR: {error}")
    for warning in result.warnings:
        print(f"  warning: {warning}")

    print(f"\n  For JSON: compositeviz snapshot inspect {target} --json")
