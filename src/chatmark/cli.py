"""chatmark CLI entrypoint."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import click

from chatmark.feed import DEFAULT_INTERVAL, FeedDriver, Frame
from chatmark.parser.md_parser import MarkdownParser
from chatmark.renderer.html_renderer import HTMLRenderer
from chatmark.renderer.terminal_renderer import TerminalRenderer
from chatmark.transcript import TranscriptError, load_transcript

logger = logging.getLogger(__name__)

_INPUT_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Render chat-style markdown messages to HTML or the terminal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("input_path", type=_INPUT_PATH)
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output HTML path")
@click.option("--title", type=str, default=None, help="Page title (defaults to the file name)")
@click.option("--streaming", is_flag=True, help="Append the streaming indicator")
def render(input_path: Path, output: Path, title: str | None, streaming: bool) -> None:
    """Convert a markdown message file into a standalone HTML page."""
    text = _read_text(input_path)
    html = HTMLRenderer().render_document(text, title=title or input_path.stem, streaming=streaming)
    _write_output(output, html)


@main.command()
@click.argument("input_path", type=_INPUT_PATH)
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output HTML path")
@click.option("--title", type=str, default=None, help="Page title")
@click.option("--assistant-name", type=str, default="Assistant", show_default=True, help="Label for assistant turns")
@click.option("--loading", is_flag=True, help="Show the last assistant reply as still streaming")
def transcript(input_path: Path, output: Path, title: str | None, assistant_name: str, loading: bool) -> None:
    """Convert a JSON chat history into a standalone HTML page."""
    try:
        messages = load_transcript(input_path)
    except TranscriptError as exc:
        raise click.ClickException(str(exc)) from exc

    renderer = HTMLRenderer(assistant_name=assistant_name)
    html = renderer.render_transcript(messages, title=title, loading=loading)
    _write_output(output, html)


@main.command()
@click.argument("input_path", type=_INPUT_PATH)
@click.option(
    "--interval",
    type=click.FloatRange(min=0),
    default=DEFAULT_INTERVAL,
    show_default=True,
    envvar="CHATMARK_INTERVAL",
    help="Seconds between revealed characters",
)
@click.option("--complete/--no-complete", default=False, show_default=True, help="Treat the message as final")
def stream(input_path: Path, interval: float, complete: bool) -> None:
    """Replay a markdown message character by character in the terminal."""
    text = _read_text(input_path)
    if not text:
        raise click.ClickException(f"{input_path.name} is empty")
    asyncio.run(_replay(text, interval=interval, complete=complete))


async def _replay(text: str, *, interval: float, complete: bool) -> None:
    renderer = TerminalRenderer()

    def show(frame: Frame) -> None:
        click.clear()
        click.echo(renderer.render(frame.blocks, streaming=frame.streaming))

    async with FeedDriver(show, interval=interval, parser=MarkdownParser()) as driver:
        driver.feed(text, is_complete=complete)
        await driver.wait()


def _read_text(input_path: Path) -> str:
    return input_path.read_text(encoding="utf-8", errors="ignore")


def _write_output(output: Path, html: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    logger.debug("wrote %d bytes to %s", len(html), output)
    click.echo(f"Rendered: {output}")


if __name__ == "__main__":  # pragma: no cover
    main()
