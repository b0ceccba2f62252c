"""
mailcheck CLI - run the API server or validate addresses from the shell.

Usage:
    mailcheck --help                      Show all commands
    mailcheck serve                       Run the HTTP API
    mailcheck serve --reload              Run with auto-reload (development)
    mailcheck check user@example.com      Validate one or more addresses
"""

import asyncio

import typer

app = typer.Typer(
    name="mailcheck",
    help="mailcheck CLI - email address validation by format and MX record",
    no_args_is_help=True,
)


def _print_error(message: str) -> None:
    """Print an error message to stderr."""
    typer.echo(f"❌ {message}", err=True)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default: HOST setting)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default: PORT setting)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API under uvicorn."""
    import uvicorn

    from mailcheck.config import get_settings
    from mailcheck.core.logging import setup_logging

    settings = get_settings()
    setup_logging()
    uvicorn.run(
        "mailcheck.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=None,
    )


@app.command()
def check(
    email_addresses: list[str] = typer.Argument(..., help="Email addresses to validate"),
):
    """Validate addresses and print one JSON verdict per line."""
    from mailcheck.core.logging import setup_logging
    from mailcheck.services.email_validation import DnsLookupError, get_email_validator

    setup_logging()
    validator = get_email_validator()

    try:
        results = asyncio.run(validator.validate_batch(email_addresses))
    except DnsLookupError as e:
        _print_error(str(e))
        raise typer.Exit(2)

    for result in results:
        typer.echo(result.model_dump_json(by_alias=True, exclude_none=True))

    if not all(result.valid for result in results):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
