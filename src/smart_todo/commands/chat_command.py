"""Command 'chat' of smart-todo - ask the AI assistant about a task."""

from typing import Annotated

import typer
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt

from smart_todo.exceptions import AIClientError
from smart_todo.services.ai import ChatSession
from smart_todo.utils.logger import get_logger
from smart_todo.utils.ui.console import get_console

from .decorators import command_wrapper
from .utils import get_chat_session, get_task_store, resolve_task

app = typer.Typer()
console = get_console()

EXIT_WORDS = ("exit", "quit", "/q")


def _print_reply(reply: str) -> None:
    console.print(
        Panel(Markdown(reply), title="Assistant", title_align="left", border_style="cyan")
    )


def _print_chat_error(error: AIClientError) -> None:
    console.print(f"[bold red]⚠ Assistant error:[/bold red] {error}")


async def _ask(session: ChatSession, text: str | None = None) -> str | None:
    """Send one turn, showing failures in the chat instead of aborting it."""
    try:
        with console.status("[dim]Thinking...[/dim]"):
            return await session.send(text)
    except AIClientError as e:
        get_logger().warning("chat turn failed: %s", e)
        _print_chat_error(e)
        return None


@app.command("chat")
@command_wrapper
async def chat(
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    message: Annotated[
        str | None,
        typer.Option("--message", "-m", help="Ask a single question and exit"),
    ] = None,
) -> None:
    """
    Chat with the AI assistant about a task and its attachment.

    Requires an API key in SMART_TODO_AI_API_KEY or set with
    'smart-todo config set-key'.
    """
    task = resolve_task(get_task_store(), task_id)
    session = get_chat_session()
    session.start(task)

    try:
        if message is not None:
            with console.status("[dim]Thinking...[/dim]"):
                reply = await session.send(message)
            _print_reply(reply)
            return

        console.print(f"[bold]Chatting about:[/bold] {task.title}")
        console.print("[dim]Type 'exit' to leave.[/dim]\n")

        reply = await _ask(session)
        if reply is not None:
            _print_reply(reply)

        while True:
            try:
                text = Prompt.ask("[bold green]You[/bold green]", console=console)
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            text = text.strip()
            if not text:
                continue
            if text.lower() in EXIT_WORDS:
                break
            reply = await _ask(session, text)
            if reply is not None:
                _print_reply(reply)
    finally:
        await session.client.close()
