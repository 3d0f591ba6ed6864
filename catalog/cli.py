"""
CLI tool for catalog administration.

Provides commands for creating the database tables, printing the dashboard
counts, listing the registered pages and running the server.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from catalog.commands.dashboard_commands import GetCatalogCountsCommand
from catalog.settings import app_settings
from catalog.storage.db import create_engine, create_session_factory, init_db

typer_app = typer.Typer(
    name="catalog",
    help="Local library catalog - manage the database and run the server",
    add_completion=False,
)
console = Console()

DatabaseUrlOption = typer.Option(
    None,
    "--database-url",
    "-d",
    help="Database URL (defaults to DATABASE_URL from settings)",
)


async def _init_db(database_url: str | None) -> None:
    engine = create_engine(database_url)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()


async def _counts(database_url: str | None):
    engine = create_engine(database_url)
    try:
        return await GetCatalogCountsCommand(
            create_session_factory(engine)
        ).execute()
    finally:
        await engine.dispose()


@typer_app.command(name="init-db")
def init_db_command(database_url: str | None = DatabaseUrlOption):
    """
    Create every catalog table that does not exist yet.

    Example:
        catalog init-db --database-url sqlite+aiosqlite:///./catalog.db
    """
    url = database_url or app_settings.DATABASE_URL
    try:
        asyncio.run(_init_db(url))
    except SQLAlchemyError as ex:
        console.print(f"[red]✗[/red] Could not create tables: {ex}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓[/green] Tables created in [cyan]{url}[/cyan]")


@typer_app.command(name="summary")
def summary(database_url: str | None = DatabaseUrlOption):
    """
    Print the dashboard counts as a table.

    Example:
        catalog summary
    """
    try:
        counts = asyncio.run(_counts(database_url))
    except SQLAlchemyError as ex:
        console.print(f"[red]✗[/red] Could not read the catalog: {ex}")
        raise typer.Exit(code=1)

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]{app_settings.APP_TITLE}[/bold cyan]",
            border_style="cyan",
        )
    )

    table = Table("Record", "Count", title="Catalog Summary")
    for label, count in counts.as_rows():
        table.add_row(label, f"[green]{count}[/green]")

    console.print(table)
    console.print()


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered pages.

    Example:
        catalog routes
    """
    from catalog import app

    table = Table("Methods", "Path", "Endpoint", title="Registered Routes")
    for route in app.routes:
        methods = getattr(route, "methods", None)
        endpoint = getattr(route, "endpoint", None)
        if not methods or endpoint is None:
            continue
        table.add_row(
            ", ".join(sorted(methods)),
            route.path,
            f"{endpoint.__module__}.[yellow]{endpoint.__name__}[/yellow]",
        )

    console.print(table)


@typer_app.command(name="serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on changes"),
):
    """
    Run the catalog with uvicorn.

    Example:
        catalog serve --port 3000 --reload
    """
    import uvicorn

    console.print(
        f"[bold]Serving[/bold] {app_settings.APP_TITLE} on "
        f"[cyan]http://{host}:{port}[/cyan]"
    )
    uvicorn.run(
        "catalog:app",
        host=host,
        port=port,
        reload=reload,
        log_level=app_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    typer_app()
