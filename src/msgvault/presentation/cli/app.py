"""msgvault CLI application using Typer.

This module provides command-line utilities for msgvault, including
retroactive encryption of stored messages and key generation.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from sqlalchemy.exc import SQLAlchemyError

from msgvault.application.commands import ReconcileMessageEncryptionCommand
from msgvault.application.dtos.security import (
    ReconciliationMode,
    ReconciliationResult,
)
from msgvault.domain.messaging.exceptions import MessageStoreError
from msgvault.domain.security.exceptions import ConstructionError
from msgvault.domain.security.services import ContentEncryptionService
from msgvault.infrastructure.persistence.sqlalchemy.database import (
    create_engine_from_url,
    create_tables,
    get_session_maker,
)
from msgvault.infrastructure.persistence.sqlalchemy.repositories import (
    MessageRepositorySQLAlchemy,
)
from msgvault.infrastructure.security import (
    AesGcmEncryptionService,
    encode_key,
    load_key,
)
from msgvault_config.settings import get_settings

app = typer.Typer(
    name="msgvault",
    help="msgvault - at-rest encryption for stored chat messages",
    no_args_is_help=True,
)
console = Console()

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging for CLI runs (level from settings)."""
    log_level_str = get_settings().log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger("msgvault").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.command("encrypt-messages")
def encrypt_messages(  # noqa: PLR0913
    topic: Optional[str] = typer.Option(
        None,
        "--topic",
        "-t",
        help="Topic whose messages should be processed",
    ),
    key_file: Optional[Path] = typer.Option(
        None,
        "--key-file",
        help="Path to file containing base64-encoded 32-byte encryption key",
    ),
    key_string: Optional[str] = typer.Option(
        None,
        "--key-string",
        help="Base64-encoded 32-byte encryption key as string",
    ),
    reverse: bool = typer.Option(
        False,
        "--reverse",
        help="Decrypt encrypted messages (use with caution)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be done without making changes",
    ),
    database_url: Optional[str] = typer.Option(
        None,
        "--database-url",
        help="SQLAlchemy URL of the message store (defaults to settings)",
    ),
) -> None:
    """Encrypt (or with --reverse decrypt) all stored messages of a topic.

    Messages already in the target state are skipped, so the command
    can be re-run safely. Per-message failures are counted and logged;
    they do not stop the run.
    """
    _configure_logging()

    if not topic:
        _fail("Please specify a topic name with --topic")

    try:
        key = load_key(key_file=key_file, key_string=key_string)
        service = AesGcmEncryptionService(enabled=True, key=key)
    except ConstructionError as e:
        _fail(f"Failed to initialize encryption: {e}")

    mode = ReconciliationMode.DECRYPT if reverse else ReconciliationMode.ENCRYPT
    url = database_url or get_settings().database_url

    try:
        result = asyncio.run(
            _run_reconciliation(url, service, topic, mode, dry_run),
        )
    except MessageStoreError as e:
        _fail(str(e))

    _print_summary(result)


async def _run_reconciliation(
    database_url: str,
    service: ContentEncryptionService,
    topic: str,
    mode: ReconciliationMode,
    dry_run: bool,
) -> ReconciliationResult:
    try:
        engine = create_engine_from_url(database_url)
    except (SQLAlchemyError, ImportError) as e:
        msg = f"Failed to open store: {e}"
        raise MessageStoreError(msg) from e

    try:
        async with get_session_maker(engine)() as session:
            command = ReconcileMessageEncryptionCommand(
                encryption_service=service,
                message_repository=MessageRepositorySQLAlchemy(session),
            )
            return await command.execute(topic=topic, mode=mode, dry_run=dry_run)
    except OSError as e:
        msg = f"Failed to open store: {e}"
        raise MessageStoreError(msg) from e
    finally:
        await engine.dispose()


def _print_summary(result: ReconciliationResult) -> None:
    if result.mode == ReconciliationMode.DECRYPT:
        title, label = "Decryption complete", "Decrypted"
    else:
        title, label = "Encryption complete", "Encrypted"

    error_style = "red" if result.error_count else "green"

    console.print(f"\n[bold]{title}:[/bold]")
    console.print(f"  Total messages: {result.total_messages}")
    console.print(f"  Processed: {result.processed}")
    console.print(f"  {label}: {result.transformed}")
    console.print(f"  [{error_style}]Errors: {result.error_count}[/{error_style}]")

    if result.dry_run:
        console.print(
            "\n[yellow]This was a dry run. No changes were made.[/yellow]",
        )


@secrets_app.command("generate-key")
def generate_key() -> None:
    """Generate a base64-encoded 32-byte key for message encryption.

    Use the output with --key-string, store it in a key file, or set it
    as ENCRYPTION_KEY in your .env file.
    """
    key = encode_key(AesGcmEncryptionService.generate_key())
    console.print(f"[cyan]ENCRYPTION_KEY[/cyan]={key}")
    console.print(
        "[yellow]⚠  Keep this key secure and never commit it "
        "to version control![/yellow]",
    )


@db_app.command("init")
def init_db(
    database_url: Optional[str] = typer.Option(
        None,
        "--database-url",
        help="SQLAlchemy URL of the message store (defaults to settings)",
    ),
) -> None:
    """Create missing database tables (idempotent)."""
    _configure_logging()
    url = database_url or get_settings().database_url

    try:
        asyncio.run(_init_tables(url))
    except (SQLAlchemyError, ImportError, OSError) as e:
        _fail(f"Failed to initialize database: {e}")

    console.print("[green]Database schema is up to date.[/green]")


async def _init_tables(database_url: str) -> None:
    engine = create_engine_from_url(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
