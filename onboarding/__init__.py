"""Onboarding wizard: discover source, role and role-specific profile."""

from onboarding.constants import ONBOARDING_LEFT, ONBOARDING_QUIT, ONBOARDING_SUCCESS
from onboarding.machine import OnboardingWizard

__all__ = ["OnboardingWizard", "ONBOARDING_SUCCESS", "ONBOARDING_QUIT", "ONBOARDING_LEFT"]
