"""Navigation prompt shown after each step's fields."""

import questionary
from questionary import Choice

from onboarding.constants import STEPS
from onboarding.machine import OnboardingWizard
from onboarding.ui import STYLE

NEXT = "next"
BACK = "back"
SKIP = "skip"
HOME = "home"
QUIT = "quit"
JUMP_PREFIX = "jump:"


def navigation_choices(wizard: OnboardingWizard) -> list[Choice]:
    """Choices for the current state. Continue/Finish and Back are shown disabled
    rather than hidden when they cannot be used."""
    choices = [
        Choice(
            wizard.primary_action,
            NEXT,
            disabled=None if wizard.can_continue else "fill in the required fields",
        ),
        Choice("Back", BACK, disabled=None if wizard.can_go_back else "first step"),
    ]
    for step, (title, _) in STEPS.items():
        if step == wizard.current_step:
            continue
        choices.append(
            Choice(
                f"Go to step {step}: {title} ({wizard.step_status(step)})",
                f"{JUMP_PREFIX}{step}",
            )
        )
    choices.extend(
        [
            Choice("Skip", SKIP),
            Choice("Back to home", HOME),
            Choice("Quit", QUIT),
        ]
    )
    return choices


def ask_navigation(wizard: OnboardingWizard) -> str | None:
    """Ask what to do next. Returns the action value or None if cancelled."""
    return questionary.select(
        "What next?",
        choices=navigation_choices(wizard),
        style=STYLE,
    ).ask()
