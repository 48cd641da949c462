"""Command for visualising detected topic clusters."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cli.context import exit_on_error, load_store
from cli.rendering import render_cluster_tree
from linkopt.scoring.clusters import detect_clusters

clusters_app = typer.Typer(help="Inspect topic clusters.", no_args_is_help=True)


@clusters_app.command("show")
@exit_on_error
def clusters_show(
    format: str = typer.Option("tree", "--format", help="Output format: tree | list"),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Crawl export CSV."),
) -> None:
    """Display detected topic clusters as an ASCII tree or flat list."""
    clusters = detect_clusters(load_store(data).pages)

    if format == "list":
        if not clusters:
            typer.echo("No topic clusters detected.")
            return
        for cluster in clusters:
            typer.echo(f"{cluster.name} [{cluster.type}] hub={cluster.hub.url} spokes={len(cluster.spokes)}")
        return

    typer.echo(render_cluster_tree(clusters))
