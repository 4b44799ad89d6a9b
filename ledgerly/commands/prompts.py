"""Prompt helpers shared by the menus."""

import typer


def prompt_line(text: str, hide_input: bool = False) -> str:
    """Prompt for one line of input, accepting an empty line.

    Empty input is returned as "" so the caller's validation reports it,
    instead of click asking again.
    """
    result: str = typer.prompt(text, type=str, default="", show_default=False, hide_input=hide_input)
    return result
