"""Tessera CLI application using Typer.

Command-line utilities for running the service and generating the JWT
signing secret for deployment configuration.
"""

import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from tessera_config.settings import get_settings

app = typer.Typer(
    name="tessera",
    help="Tessera - credential and bearer token service CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a JWT signing secret for the Tessera configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Tessera Secret Generation[/bold green]")
    console.print("=" * 60)

    # 64 random bytes, url-safe encoded
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]TESSERA_JWT_SECRET_KEY[/cyan]={jwt_secret}", soft_wrap=True)

    console.print("=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]\n"
    )


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: settings)"),
    port: Optional[int] = typer.Option(None, help="Port (default: settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the Tessera API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tessera.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
