"""Onboarding wizard steps."""

from onboarding.steps.discover_step import run_discover_step
from onboarding.steps.navigation_step import ask_navigation
from onboarding.steps.profile_step import run_profile_step
from onboarding.steps.role_step import run_role_step

__all__ = ["run_discover_step", "run_role_step", "run_profile_step", "ask_navigation"]
