"""CLI entrypoints for repoblog."""

from __future__ import annotations

import logging
from contextlib import closing
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.tree import Tree

from .config import Config, load_config
from .navigation import NavigationLeaf, NavigationNode
from .pipeline import NoContentFound, RenderedPage
from .provider import UpstreamFetchError
from .server import bound_url, make_request_handler, serve as serve_http
from .service import BlogService

console = Console()
app = typer.Typer(help="Render GitHub repositories as markdown blogs.")

ConfigPathOption = Annotated[
    str,
    typer.Option("--config", "-c", help="Path to repoblog.yml or a directory containing it."),
]
BranchOption = Annotated[
    str | None,
    typer.Option("--branch", "-b", help="Branch to render (defaults to the configured branch)."),
]


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
) -> None:
    """Render GitHub repositories as markdown blogs."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def serve(
    config_path: ConfigPathOption = ".",
    host: Annotated[
        str | None,
        typer.Option("--host", help="Host interface to bind (overrides config)."),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to bind (overrides config)."),
    ] = None,
) -> None:
    """Serve blog pages for any repository over HTTP."""
    config = _load(config_path)
    bind_host = host or config.server.host
    bind_port = config.server.port if port is None else port
    if bind_port < 0 or bind_port > 65535:
        raise typer.BadParameter("Port must be between 0 and 65535.")

    service = BlogService(config)
    handler = make_request_handler(service)
    try:
        with closing(service), serve_http(bind_host, bind_port, handler) as server:
            console.print(
                f"[bold green]repoblog[/]: serving at {bound_url(server)} (press Ctrl+C to stop)"
            )
            try:
                server.serve_forever()
            except KeyboardInterrupt:
                console.print("\n[bold yellow]Stopping server...[/]")
    except OSError as exc:
        console.print(f"[bold red]Failed to start server[/]: {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def render(
    owner: Annotated[str, typer.Argument(help="Repository owner.")],
    repo: Annotated[str, typer.Argument(help="Repository name.")],
    path: Annotated[
        str | None,
        typer.Argument(help="Document path; defaults to the most recent post."),
    ] = None,
    branch: BranchOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the HTML page to this file instead of stdout."),
    ] = None,
    config_path: ConfigPathOption = ".",
) -> None:
    """Fetch a repository and render one page."""
    config = _load(config_path)
    target_branch = branch or config.default_branch

    with closing(BlogService(config)) as service:
        page = _build_page(service, owner, repo, target_branch, path)
        html_text = service.render_page(page)

    if output is None:
        typer.echo(html_text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html_text, encoding="utf-8")
    console.print(f"[bold green]Rendered[/]: {page.path} -> {output}", highlight=False)


@app.command()
def tree(
    owner: Annotated[str, typer.Argument(help="Repository owner.")],
    repo: Annotated[str, typer.Argument(help="Repository name.")],
    branch: BranchOption = None,
    config_path: ConfigPathOption = ".",
) -> None:
    """Show the base path, default post and navigation tree of a repository."""
    config = _load(config_path)
    target_branch = branch or config.default_branch

    with closing(BlogService(config)) as service:
        page = _build_page(service, owner, repo, target_branch)

    console.print(f"[bold blue]Base path[/]: {page.base_path or '(repository root)'}", highlight=False)
    console.print(f"[bold blue]Latest post[/]: {page.path}", highlight=False)
    console.print(_rich_tree(page.navigation, label=f"{owner}/{repo}@{target_branch}"))


def _build_page(
    service: BlogService, owner: str, repo: str, branch: str, path: str | None = None
) -> RenderedPage:
    try:
        return service.build_page(owner, repo, branch, path)
    except UpstreamFetchError as exc:
        console.print(f"[bold red]Fetch failed[/] ({exc.status_code}): {exc.message}")
        raise typer.Exit(code=1) from exc
    except NoContentFound as exc:
        console.print(f"[bold yellow]No content[/]: {exc}")
        raise typer.Exit(code=1) from exc


def _rich_tree(node: NavigationNode, *, label: str) -> Tree:
    root = Tree(label, highlight=False)
    _add_branch(root, node)
    return root


def _add_branch(parent: Tree, node: NavigationNode) -> None:
    for directory in node.directories.values():
        branch = parent.add(f"[bold]{escape(directory.name)}/[/]")
        _add_branch(branch, directory)
    for leaf in node.files:
        parent.add(_leaf_label(leaf))


def _leaf_label(leaf: NavigationLeaf) -> str:
    if leaf.active:
        return f"[bold green]{escape(leaf.display_name)}[/] (latest)"
    return escape(leaf.display_name)


def _load(path: str) -> Config:
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {path}") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
