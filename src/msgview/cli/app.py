"""Main CLI application using Typer."""
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from ..chatlog import (
    ChatLogError,
    ChatLogParser,
    CorruptChatLogError,
    MessageRecord,
    ParseError,
    build_fragments,
)
from ..ui.formatting import render_fragments
from .settings import LOG_LEVELS, get_encoding, get_log_level, get_start_dir

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="msgview",
    help="Viewer for .msg chat logs",
    no_args_is_help=True,
    add_completion=False,
)

# Console for rich output
console = Console()


def _load_records(path: Path, encoding: str) -> list[MessageRecord]:
    """Parse a chat log for a CLI command, exiting with code 1 on failure."""
    parser = ChatLogParser(encoding=encoding)
    try:
        records = parser.parse_file(path)
        if isinstance(records, ParseError):
            raise CorruptChatLogError()
    except (OSError, ChatLogError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    return records


@app.command()
def view(
    path: Path | None = typer.Argument(
        None,
        help="Chat log to open on startup"
    ),
    start_dir: Path | None = typer.Option(
        None,
        "--start-dir",
        "-d",
        file_okay=False,
        dir_okay=True,
        help="Folder the file picker opens in (default: MSGVIEW_START_DIR)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level: debug, info, warning, error"
    ),
):
    """Open the chat viewer window."""
    from ..ui import run_chat_viewer

    if log_level is not None and log_level.lower() not in LOG_LEVELS:
        console.print(f"[red]Error: Unknown log level: {log_level}[/red]")
        raise typer.Exit(code=1)

    run_chat_viewer(
        initial_file=path,
        start_dir=start_dir or get_start_dir(),
        log_level=log_level or get_log_level(),
        encoding=get_encoding(),
    )


@app.command()
def show(
    path: Path = typer.Argument(..., help="Chat log to print"),
):
    """Print a chat log to the terminal."""
    records = _load_records(path, get_encoding())

    if not records:
        console.print("[yellow]No messages[/yellow]")
        return

    console.print(render_fragments(build_fragments(records)), end="")


@app.command()
def check(
    path: Path = typer.Argument(..., help="Chat log to validate"),
):
    """Validate a chat log and show a summary."""
    encoding = get_encoding()
    records = _load_records(path, encoding)

    senders: list[str] = []
    for record in records:
        name = record.sender.removesuffix(": ")
        if name not in senders:
            senders.append(name)

    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="bold cyan", width=10)
    table.add_column("Value")

    table.add_row("File", str(path))
    table.add_row("Encoding", encoding)
    table.add_row("Messages", str(len(records)))
    table.add_row("Senders", ", ".join(senders) or "None")

    console.print("[green]+[/green] Chat log is valid")
    console.print(table)


if __name__ == "__main__":
    app()
