"""Completion guards: may the user leave the current step via Continue/Finish?

Pure functions of WizardState. Callers recompute them on every read; nothing
here is cached.
"""

from onboarding.constants import STEP_DISCOVER, STEP_PROFILE, STEP_ROLE
from onboarding.state import VALID_ROLES, WizardState


def discover_step_complete(state: WizardState) -> bool:
    return bool(state.discover_source)


def role_step_complete(state: WizardState) -> bool:
    return state.role in VALID_ROLES


def profile_step_complete(state: WizardState) -> bool:
    """Role-specific required fields are all non-empty.

    Only the fields in the active profile's REQUIRED set gate progression;
    the rest of the profile is optional. False when no valid role is chosen.
    """
    profile = state.profile
    if state.role not in VALID_ROLES or profile is None or profile.role != state.role:
        return False
    return not profile.missing_required()


_GUARDS = {
    STEP_DISCOVER: discover_step_complete,
    STEP_ROLE: role_step_complete,
    STEP_PROFILE: profile_step_complete,
}


def can_continue(state: WizardState) -> bool:
    """Guard for the current step. Unknown steps never pass."""
    guard = _GUARDS.get(state.current_step)
    return guard(state) if guard is not None else False
