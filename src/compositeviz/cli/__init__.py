"""compositeviz CLI: render and inspect graph snapshots.

Entry point for the `compositeviz` command. Requires ``pip install compositeviz[cli]``.

Commands:
    graph              Render the node-link diagram of a snapshot
    timeline           Render the timeline of a snapshot
    snapshot ls        List registered snapshots from pyproject.toml
    snapshot inspect   Show snapshot structure and rendering issues
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install compositeviz[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all subcommands."""
    _require_typer()

    import typer

    from compositeviz.cli.render_cmd import register_commands
    from compositeviz.cli.snapshot_cmd import app as snapshot_app

    app = typer.Typer(
        name="compositeviz",
        help="Debug views for video-compositing render graphs.",
        no_args_is_help=True,
    )
    app.add_typer(snapshot_app, name="snapshot")
    register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
