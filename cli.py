import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from apphub.config import HubCfg, load_config, load_navigation
from apphub.context import AppContext
from apphub.navigation import StaticNavigation, iter_region_items

app = typer.Typer(help="Inspect how micro-apps resolve against a navigation tree.")
console = Console()

NavOpt = typer.Option(..., "--nav", help="Navigation tree dump (YAML or JSON).")
CfgOpt = typer.Option(None, "--config", help="Optional hub configuration file.")

def _context(nav: Path, path: str, config: Optional[Path]) -> AppContext:
    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[RichHandler(console=console)])
    try:
        cfg = load_config(config) if config else HubCfg()
        tree = load_navigation(nav)
    except (OSError, ValidationError) as exc:
        console.print(f"[red]✘ {exc}")
        raise typer.Exit(code=1)
    return AppContext(nav=StaticNavigation(nav=tree, path=path), cfg=cfg)

@app.command()
def resolve(
    url_path: str = typer.Argument(..., help="Current URL path, e.g. /app/profile/edit."),
    nav: Path = NavOpt,
    config: Optional[Path] = CfgOpt,
):
    """Print the micro-app that owns URL_PATH."""
    ctx = _context(nav, url_path, config)
    app_id = ctx.current_app_id()
    if app_id is None:
        console.print(f"[yellow]no micro-app owns {url_path}")
        raise typer.Exit(code=1)
    console.print(f"[green]{app_id}[/] → {ctx.resolve_path(app_id)}")

@app.command()
def path(
    app_id: str = typer.Argument(..., help="Micro-app id."),
    nav: Path = NavOpt,
    config: Optional[Path] = CfgOpt,
):
    """Print the path of APP_ID and whether it is available."""
    ctx = _context(nav, "/", config)
    state = "[green]available" if ctx.is_app_available(app_id) else "[red]unavailable"
    console.print(f"{ctx.resolve_path(app_id) or '(empty)'}  {state}")

@app.command()
def tree(nav: Path = NavOpt, config: Optional[Path] = CfgOpt):
    """List the nav items considered during resolution, in scan order."""
    ctx = _context(nav, "/", config)
    table = Table("region", "item", "app", "path")
    for region, item in iter_region_items(ctx.nav.tree(), ctx.cfg.regions):
        table.add_row(region, item.id, item.app_id, ctx.nav.tree().paths.get(item.app_id, "-"))
    console.print(table)
    console.print(f"context path: {ctx.context_path() or '(empty)'}  locale: {ctx.get_preferred_locale() or '(none)'}")

if __name__ == "__main__":
    app()
