"""Startup banner for the bridge CLI"""

from rich.table import Table
from bridge import BridgeServer


def build_endpoint_table(server: BridgeServer) -> Table:
    """Table of the routes served by a bridge instance"""
    table = Table(title=f"Canvas OAuth Bridge - {server.config.institution_name}")
    table.add_column("Method", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Purpose")

    table.add_row("GET", "/", "Landing page")
    table.add_row("GET", "/authorize", "Token login form")
    table.add_row("POST", "/callback", "Redirect with token as code")
    table.add_row("POST", "/token", "Code-for-token exchange")
    if server.config.passthrough_enabled:
        table.add_row("*", "/api/v1/*", f"Pass-through to {server.config.upstream_api_host}")
    return table


def show_startup_banner(server: BridgeServer, console):
    """
    Print where the bridge is listening and what it serves

    Args:
        server: BridgeServer about to run
        console: Rich console for output
    """
    console.print(f"[bold]Starting bridge at[/bold] {server.base_url}\n")
    console.print(build_endpoint_table(server))
    console.print("\n[dim]Press Ctrl+C to stop[/dim]\n")
