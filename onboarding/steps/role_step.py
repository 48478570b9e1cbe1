"""Step 2: student or educator."""

import questionary

from onboarding.machine import OnboardingWizard
from onboarding.options import ROLES
from onboarding.ui import STYLE, choices_for, default_for


def run_role_step(wizard: OnboardingWizard) -> bool:
    """Ask for the role. Returns False if cancelled."""
    role = questionary.select(
        "Choose your role to tailor your experience:",
        choices=choices_for(ROLES),
        default=default_for(ROLES, wizard.state.role),
        style=STYLE,
    ).ask()
    if role is None:
        return False
    wizard.select_role(role)
    return True
