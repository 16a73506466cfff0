"""Story CLI commands - thin wrappers orchestrating display and service."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from ..core.types import Failure
from ..providers.config import load_story_config
from ..story.service import create_story, get_missing_api_keys
from .console import console, print_error, print_success
from .display import show_config_table, show_story, show_styles_table
from .service import build_request_payload, save_illustration


def generate(
    photo: Path = typer.Option(
        ..., "--photo", "-p", help="Child photo (JPEG, PNG or WebP)",
        exists=True, dir_okay=False, readable=True,
    ),
    character: str = typer.Option(..., "--character", "-c", help="Favorite character"),
    age_group: str = typer.Option("6-8", "--age-group", "-a", help="Age group: 3-5, 6-8 or 9-12"),
    style: str = typer.Option("space-adventure", "--style", "-s", help="Story style id"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
    image_out: Optional[Path] = typer.Option(None, "--image-out", "-o", help="Write the illustration here"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Generate a personalized story and illustration.

    Use `magic-story styles` to list the accepted age groups and styles.
    """
    config = load_story_config(config_path)
    payload = build_request_payload(photo, age_group, character, style)

    result = asyncio.run(create_story(payload, config))

    if isinstance(result, Failure):
        print_error(result.error, result.details)
        raise typer.Exit(1)

    story = result.value

    if as_json:
        typer.echo(json.dumps(story.to_dict(), indent=2, ensure_ascii=False))
    else:
        show_story(console, story)

    if image_out is not None:
        try:
            saved_path = save_illustration(story.image_url, image_out)
        except ValueError as e:
            print_error(f"Could not save illustration: {e}")
            raise typer.Exit(1)
        if not as_json:
            print_success(f"Illustration saved to {saved_path}")


def check_config(
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
) -> None:
    """Show the resolved provider configuration and missing API keys."""
    config = load_story_config(config_path)
    missing_keys = get_missing_api_keys(config.credentials)

    show_config_table(console, config, missing_keys)

    if missing_keys:
        raise typer.Exit(1)


def styles() -> None:
    """List accepted age groups and story styles."""
    show_styles_table(console)
