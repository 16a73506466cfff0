"""Display functions for CLI commands - pure functions for Rich output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..constants import ENV_IMAGE_API_KEY, ENV_TEXT_API_KEY, AgeGroup, StoryStyle
from ..providers.config import StoryConfig
from ..story.models import StoryResult


def show_story(console: Console, story: StoryResult) -> None:
    """Display a generated story."""
    metadata = story.metadata
    console.print(Panel(
        Text(story.story_text),
        title=f"[bold cyan]{escape(story.title)}[/bold cyan]",
        subtitle=(
            f"{metadata.story_style.label} | ages {metadata.age_group.value} | "
            f"{escape(metadata.favorite_character)}"
        ),
    ))


def show_config_table(console: Console, config: StoryConfig, missing_keys: list[str]) -> None:
    """Display resolved provider configuration without revealing keys."""
    credentials = config.credentials

    table = Table(title="Story Provider Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Endpoint", config.provider_settings.base_url)
    table.add_row("Timeout", f"{config.provider_settings.timeout_seconds:g}s")
    table.add_row("Text model", credentials.get_text_model())
    table.add_row("Image model", credentials.get_image_model())
    table.add_row(ENV_TEXT_API_KEY, "set" if credentials.text_api_key else "[dim]not set[/dim]")
    table.add_row(ENV_IMAGE_API_KEY, "set" if credentials.image_api_key else "[dim]not set[/dim]")

    console.print(table)

    if missing_keys:
        console.print(f"[yellow]Missing API keys: {', '.join(missing_keys)}[/yellow]")
    else:
        console.print("[green]Ready for live generation.[/green]")


def show_styles_table(console: Console) -> None:
    """Display accepted age groups and story styles."""
    table = Table(title="Story Options")
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Label", style="yellow")

    for group in AgeGroup:
        table.add_row("age group", group.value, f"Ages {group.value}")
    for style in StoryStyle:
        table.add_row("story style", style.value, style.label)

    console.print(table)
