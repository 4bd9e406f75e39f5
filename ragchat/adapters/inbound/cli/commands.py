"""CLI interface for the ragchat backend."""

import asyncio
import json
import os

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import ChatAnswer
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="ragchat",
    help="ragchat - retrieval-augmented news chat backend",
    add_completion=False,
)

console = Console(force_terminal=True, legacy_windows=False)

# Determine if we're in debug mode (shows full stack traces)
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


def handle_cli_error(exc: Exception) -> None:
    """Handle and display errors in CLI with structured format.

    In debug mode, shows full JSON error details.
    In normal mode, shows a user-friendly message with error code.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
    else:
        error_type = error_data["error"]["type"]
        error_msg = error_data["error"]["message"]
        error_code = error_data["error"].get("code", "UNKNOWN")
        location = error_data.get("location", {})

        console.print(f"\n[red]Error [{error_code}]:[/] {error_msg}")
        console.print(f"[dim]Type: {error_type}[/]")

        if location:
            loc_str = f"{location.get('file', '?')}:{location.get('line', '?')} in {location.get('method', '?')}"
            console.print(f"[dim]Location: {loc_str}[/]")

        console.print("[dim]Set DEBUG=true for full details[/]")


def _open_store():
    """Return the initialized vector store from the container."""
    from ....composition.container import get_vector_store

    settings.ensure_directories()
    store = get_vector_store()
    store.initialize()
    return store


async def _connect_sessions() -> None:
    from ....adapters.outbound.session import RedisSessionStore
    from ....composition.container import get_session_store

    sessions = get_session_store()
    if isinstance(sessions, RedisSessionStore):
        await sessions.connect()


async def _close_sessions() -> None:
    from ....adapters.outbound.session import RedisSessionStore
    from ....composition.container import get_session_store

    sessions = get_session_store()
    if isinstance(sessions, RedisSessionStore):
        await sessions.close()


def _print_answer(answer: ChatAnswer) -> None:
    console.print(
        Panel(
            Markdown(answer.answer),
            title=f"[bold blue]Assistant[/] [dim]({answer.mode.value})[/]",
            border_style="blue",
        )
    )
    if answer.context:
        console.print("[dim]Sources:[/]")
        for item in answer.context[:3]:
            console.print(f"  [dim][{item.index}] {item.source} ({item.score:.2f})[/]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show INFO logs"),
) -> None:
    """ragchat command-line tools."""
    setup_logging(
        level=settings.log_level if verbose else "WARNING",
        json_format=settings.log_json,
    )


@app.command()
def seed(
    reset: bool = typer.Option(False, "--reset", help="Clear the store before seeding"),
    upsert: bool = typer.Option(
        False, "--upsert", help="Replace articles with matching ids instead of appending"
    ),
) -> None:
    """Seed the vector store with the sample news corpus."""
    from ....composition.container import get_embedder
    from ....core.services import IngestService
    from ....data.sample_corpus import NEWS_ARTICLES

    async def _seed() -> int:
        await _connect_sessions()
        try:
            service = IngestService(get_embedder(), store)
            return await service.ingest(NEWS_ARTICLES, reset=reset, upsert=upsert)
        finally:
            await _close_sessions()

    try:
        store = _open_store()
        with console.status(f"[bold green]Embedding {len(NEWS_ARTICLES)} articles...[/]"):
            written = asyncio.run(_seed())
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(f"[green]✅ Seeded {written} articles[/] (total: {store.count()} documents)")


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from settings)"),
    port: int = typer.Option(None, "--port", help="Port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the HTTP/WebSocket API server."""
    import uvicorn

    bind_host = host or settings.host
    bind_port = port or settings.port
    console.print(f"[bold]Starting ragchat API on http://{bind_host}:{bind_port}[/]")
    uvicorn.run(
        "ragchat.adapters.inbound.api.main:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
    )


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question about the news corpus"),
    session_id: str = typer.Option(None, "--session", "-s", help="Record under this session"),
) -> None:
    """Ask a single question and get an answer."""
    from ....composition.container import get_chat_service

    async def _ask() -> ChatAnswer:
        await _connect_sessions()
        try:
            return await get_chat_service().ask(question, session_id)
        finally:
            await _close_sessions()

    try:
        _open_store()
        with console.status("[bold green]Thinking...[/]"):
            answer = asyncio.run(_ask())
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    _print_answer(answer)


@app.command()
def chat() -> None:
    """Start an interactive chat session, streaming answers as they arrive."""
    import uuid

    from ....composition.container import get_chat_service

    console.print(
        Panel.fit(
            "[bold blue]ragchat[/]\n"
            "[dim]Ask about the indexed news articles[/]\n\n"
            "Examples:\n"
            "• What happened with AI regulation this week?\n"
            "• Any news about climate agreements?\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Welcome to ragchat",
            border_style="blue",
        )
    )

    try:
        _open_store()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    session_id = str(uuid.uuid4())
    console.print(f"[dim]Session: {session_id}[/]")

    async def _loop() -> None:
        service = get_chat_service()
        await _connect_sessions()
        try:
            while True:
                query = Prompt.ask("\n[bold cyan]You[/]")

                if query.lower() in ("quit", "exit", "q"):
                    console.print("[dim]Goodbye![/]")
                    break

                if not query.strip():
                    continue

                try:
                    console.print("[bold blue]Assistant:[/] ", end="")
                    sources = []
                    async for event in service.ask_stream(query, session_id):
                        if event.type == "context":
                            sources = event.content
                        elif event.type == "answer_chunk":
                            console.print(event.content, end="", markup=False)
                    console.print()
                    for item in sources[:3]:
                        console.print(
                            f"  [dim][{item['index']}] {item['source']} ({item['score']:.2f})[/]"
                        )
                except Exception as exc:
                    handle_cli_error(exc)
        finally:
            await _close_sessions()

    try:
        asyncio.run(_loop())
    except KeyboardInterrupt:
        console.print("\n[dim]Goodbye![/]")


@app.command()
def stats() -> None:
    """Show the current status of the knowledge base."""
    console.print("[bold]ragchat Status[/]\n")

    if settings.gemini_api_key:
        console.print("✅ Gemini API key configured")
    else:
        console.print("❌ Gemini API key not set (set GEMINI_API_KEY in .env)")

    try:
        store = _open_store()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    info = store.stats()
    table = Table(title="Vector Store")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key in ("backend", "count", "dimension", "saved_at"):
        table.add_row(key, str(info.get(key)))
    console.print(table)

    if info["count"] == 0:
        console.print("\n[yellow]Vector store is empty. Run 'ragchat seed' to index the sample corpus.[/]")


@app.command()
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove every document from the vector store."""
    try:
        store = _open_store()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if not yes and not typer.confirm(f"Delete all {store.count()} documents?"):
        raise typer.Abort()

    try:
        store.clear()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print("[green]✅ Vector store cleared[/]")


if __name__ == "__main__":
    app()
