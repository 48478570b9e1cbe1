"""Onboarding wizard state machine.

Steps run in order: discover source -> role -> role-specific profile.
Continue/Finish is gated by the current step's guard; Back and the step
indicator are not. Finish persists the role and redirects to the matching
dashboard. Every mutation is a synchronous reaction to one user event.
"""

import logging

from core.navigation import Navigator
from core.session import Routes, persist_role, skip_target
from core.storage import KeyValueStore
from onboarding.constants import FIRST_STEP, LAST_STEP, STEPS
from onboarding.guards import can_continue
from onboarding.state import EducatorProfile, StudentProfile, WizardState, new_profile

logger = logging.getLogger(__name__)


class OnboardingWizard:
    """Drives a WizardState through the onboarding steps."""

    def __init__(
        self,
        store: KeyValueStore,
        navigator: Navigator | None = None,
        routes: Routes | None = None,
    ) -> None:
        self.state = WizardState()
        self.finished = False
        self.destination: str | None = None
        self._store = store
        self._navigator = navigator
        self._routes = routes or Routes()

    # -- derived view ------------------------------------------------------

    @property
    def current_step(self) -> int:
        return self.state.current_step

    @property
    def is_last_step(self) -> bool:
        return self.state.current_step == LAST_STEP

    @property
    def can_continue(self) -> bool:
        return can_continue(self.state)

    @property
    def can_go_back(self) -> bool:
        return self.state.current_step > FIRST_STEP

    @property
    def primary_action(self) -> str:
        return "Finish" if self.is_last_step else "Continue"

    def step_status(self, step: int) -> str:
        """Indicator state of step relative to the current one."""
        if step < self.state.current_step:
            return "completed"
        if step == self.state.current_step:
            return "current"
        return "upcoming"

    # -- field input -------------------------------------------------------

    def select_discover_source(self, value: str) -> None:
        self.state.discover_source = value

    def select_role(self, value: str) -> None:
        """Set the role and keep the profile in step with it.

        Same role keeps what was entered; another valid role starts an empty
        profile of that kind; anything else leaves no profile.
        """
        self.state.role = value
        profile = self.state.profile
        if profile is not None and profile.role == value:
            return
        self.state.profile = new_profile(value)
        if profile is not None:
            logger.debug("Role changed to %r, discarded %s profile", value, profile.role)

    def set_field(self, name: str, value: str) -> None:
        """Assign a single-value field of the active profile."""
        profile = self._active_profile()
        if name not in profile.editable_fields() or name in profile.MULTI_SELECT:
            raise ValueError(f"{name!r} is not a single-value {profile.role} field")
        setattr(profile, name, value)

    def toggle_tag(self, name: str, tag: str) -> bool:
        """Add tag to a multi-select field, or remove it if present.

        Returns True when the tag is selected afterwards.
        """
        profile = self._active_profile()
        if name not in profile.MULTI_SELECT:
            raise ValueError(f"{name!r} is not a multi-select {profile.role} field")
        tags: list[str] = getattr(profile, name)
        if tag in tags:
            setattr(profile, name, [t for t in tags if t != tag])
            return False
        setattr(profile, name, [*tags, tag])
        return True

    def _active_profile(self) -> StudentProfile | EducatorProfile:
        if self.state.profile is None:
            raise RuntimeError("No profile: select student or educator first")
        return self.state.profile

    # -- transitions -------------------------------------------------------

    def next(self) -> bool:
        """Continue (steps 1-2) or Finish (last step).

        Does nothing and returns False while the guard is unsatisfied.
        """
        if self.finished:
            return False
        if not self.can_continue:
            logger.debug("Continue refused on step %d", self.state.current_step)
            return False
        if self.state.current_step < LAST_STEP:
            self.state.current_step += 1
            logger.debug("Advanced to step %d", self.state.current_step)
            return True
        self._finish()
        return True

    def back(self) -> bool:
        if not self.can_go_back:
            return False
        self.state.current_step -= 1
        logger.debug("Back to step %d", self.state.current_step)
        return True

    def jump_to(self, step: int) -> None:
        """Step indicator click: moves to step without checking any guard."""
        if step not in STEPS:
            raise ValueError(f"Step must be between {FIRST_STEP} and {LAST_STEP}, got {step}")
        self.state.current_step = step
        logger.debug("Jumped to step %d", step)

    def _finish(self) -> None:
        role = self.state.role
        if role:
            persist_role(self._store, role)
        self.finished = True
        self._redirect(self._routes.for_role(role))
        logger.info("Onboarding finished as %s", role or "unknown role")

    # -- exits that bypass the wizard --------------------------------------

    def skip(self) -> str:
        """Leave without finishing. Nothing is persisted."""
        target = skip_target(self._store, self._routes)
        self._redirect(target)
        return target

    def go_home(self) -> str:
        self._redirect(self._routes.home)
        return self._routes.home

    def _redirect(self, path: str) -> None:
        self.destination = path
        if self._navigator is not None:
            self._navigator.replace(path)
