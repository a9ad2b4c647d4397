"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) out of the command
definitions; this module knows nothing about the registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from doi_query.domain.models.record import Record

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "DOI Query") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def record_table(record: Record) -> None:
    """Print a content record as a two-column table.

    Registry text is escaped so brackets in titles are not read as markup.
    """
    table = Table(
        title=f"📚 {escape(record.doi or '')}", show_header=False, border_style="cyan"
    )
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Type", record.type.value if record.type else "")
    table.add_row("Title", escape(record.title or "") or "[dim]—[/]")
    authors = "\n".join(a.full_name for a in record.authors)
    table.add_row("Authors", escape(authors) or "[dim]—[/]")
    table.add_row("Journal", escape(record.journal or "") or "[dim]—[/]")
    table.add_row("Citation", escape((record.citation or "").strip()) or "[dim]—[/]")
    table.add_row("Published", record.pub_date.isoformat() if record.pub_date else "[dim]—[/]")
    console.print(table)


def url_table(query_url: str, lookup_url: str) -> None:
    """Print the registry query and resolver URLs."""
    table = Table(show_header=False, border_style="blue")
    table.add_column("Kind", style="bold")
    table.add_column("URL", overflow="fold")
    table.add_row("Query", query_url)
    table.add_row("Resolver", lookup_url)
    console.print(table)
