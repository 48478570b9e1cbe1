"""Step 1: where the user discovered Hexon."""

import questionary

from onboarding.machine import OnboardingWizard
from onboarding.options import DISCOVER_SOURCES
from onboarding.ui import STYLE, choices_for, default_for


def run_discover_step(wizard: OnboardingWizard) -> bool:
    """Ask for the discover source. Returns False if cancelled."""
    source = questionary.select(
        "Where did you find us?",
        choices=choices_for(DISCOVER_SOURCES),
        default=default_for(DISCOVER_SOURCES, wizard.state.discover_source),
        style=STYLE,
    ).ask()
    if source is None:
        return False
    wizard.select_discover_source(source)
    return True
