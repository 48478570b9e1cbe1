"""Onboarding wizard orchestration."""

import logging
from dataclasses import dataclass
from typing import Callable

from core.navigation import Navigator
from core.session import Routes
from core.storage import KeyValueStore
from onboarding.constants import LAST_STEP, STEP_DISCOVER, STEP_PROFILE, STEP_ROLE, STEPS
from onboarding.machine import OnboardingWizard
from onboarding.steps import ask_navigation, run_discover_step, run_profile_step, run_role_step
from onboarding.steps.navigation_step import BACK, HOME, JUMP_PREFIX, NEXT, QUIT, SKIP
from onboarding.ui import print_step_header

logger = logging.getLogger(__name__)

_STEP_RUNNERS: dict[int, Callable[[OnboardingWizard], bool]] = {
    STEP_DISCOVER: run_discover_step,
    STEP_ROLE: run_role_step,
    STEP_PROFILE: run_profile_step,
}


@dataclass
class WizardResult:
    """Result of running the wizard."""

    success: bool  # Finish reached, role persisted
    left: bool  # Left through Skip or Back to home
    destination: str | None = None


def run_wizard(
    store: KeyValueStore,
    navigator: Navigator | None = None,
    routes: Routes | None = None,
) -> WizardResult:
    """Run the interactive wizard until Finish, Skip, Back to home or cancel.

    Returns WizardResult(success=True) once the role is persisted.
    Returns WizardResult(success=False, left=True) when the user skipped or went home.
    Returns WizardResult(success=False, left=False) when the user cancelled.
    """
    wizard = OnboardingWizard(store, navigator=navigator, routes=routes)

    while True:
        step = wizard.current_step
        title, description = STEPS[step]
        print_step_header(step, LAST_STEP, title, description)

        if not _STEP_RUNNERS[step](wizard):
            return WizardResult(success=False, left=False)

        action = ask_navigation(wizard)
        if action is None or action == QUIT:
            logger.info("Onboarding cancelled on step %d", step)
            return WizardResult(success=False, left=False)

        if action == NEXT:
            wizard.next()
            if wizard.finished:
                return WizardResult(success=True, left=False, destination=wizard.destination)
        elif action == BACK:
            wizard.back()
        elif action.startswith(JUMP_PREFIX):
            wizard.jump_to(int(action[len(JUMP_PREFIX):]))
        elif action == SKIP:
            return WizardResult(success=False, left=True, destination=wizard.skip())
        elif action == HOME:
            return WizardResult(success=False, left=True, destination=wizard.go_home())
