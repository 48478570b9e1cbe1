"""Prompt styling and small helpers shared by the wizard steps."""

from questionary import Choice, Style

STYLE = Style(
    [
        ("qmark", "fg:#9b87ff bold"),
        ("question", "bold"),
        ("answer", "fg:#9b87ff bold"),
        ("pointer", "fg:#9b87ff bold"),
        ("highlighted", "fg:#9b87ff bold"),
        ("selected", "fg:#9b87ff"),
        ("disabled", "fg:#858585 italic"),
    ]
)

EMPTY_VALUE = ""


def choices_for(
    options: list[tuple[str, str]], *, optional: bool = False
) -> list[Choice]:
    """questionary choices for a catalog. Optional fields get a leading "Leave empty" entry."""
    choices = [Choice("Leave empty", EMPTY_VALUE)] if optional else []
    choices.extend(Choice(label, value) for label, value in options)
    return choices


def default_for(options: list[tuple[str, str]], current: str) -> str | None:
    """current when it is one of the catalog values, else None (questionary rejects unknown defaults)."""
    return current if any(v == current for _, v in options) else None


def print_step_header(step: int, total: int, title: str, description: str) -> None:
    print(f"\nStep {step}/{total}: {title}")
    print(f"{description}\n")
