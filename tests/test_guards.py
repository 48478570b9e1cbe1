"""Tests for onboarding.guards."""

import pytest

from onboarding.guards import can_continue
from onboarding.options import DISCOVER_SOURCES
from onboarding.state import EducatorProfile, StudentProfile, WizardState


@pytest.mark.parametrize("source", [value for _, value in DISCOVER_SOURCES])
def test_step1_passes_for_every_source(source: str) -> None:
    assert can_continue(WizardState(current_step=1, discover_source=source)) is True


def test_step1_blocks_without_source() -> None:
    assert can_continue(WizardState(current_step=1)) is False


@pytest.mark.parametrize("role", ["", "admin", "Student", "student ", "teacher"])
def test_step2_blocks_invalid_roles(role: str) -> None:
    assert can_continue(WizardState(current_step=2, role=role)) is False


@pytest.mark.parametrize("role", ["student", "educator"])
def test_step2_passes_valid_roles(role: str) -> None:
    assert can_continue(WizardState(current_step=2, role=role)) is True


def test_step3_student_only_core_fields_required() -> None:
    """Institution, year, availability, graduation year and interests are optional."""
    profile = StudentProfile(
        academic_background="undergraduate", field_of_study="CS", learning_mode="hybrid"
    )
    state = WizardState(current_step=3, role="student", profile=profile)
    assert can_continue(state) is True


@pytest.mark.parametrize("missing", ["academic_background", "field_of_study", "learning_mode"])
def test_step3_student_blocks_on_each_required_field(missing: str) -> None:
    fields = {
        "academic_background": "undergraduate",
        "field_of_study": "CS",
        "learning_mode": "hybrid",
    }
    fields[missing] = ""
    state = WizardState(current_step=3, role="student", profile=StudentProfile(**fields))
    assert can_continue(state) is False


def test_step3_educator_blocks_without_institution() -> None:
    profile = EducatorProfile(
        educational_background="phd", degree_field="computer-science", preferred_format="online"
    )
    state = WizardState(current_step=3, role="educator", profile=profile)
    assert can_continue(state) is False


def test_step3_educator_passes_with_required_fields_only() -> None:
    profile = EducatorProfile(
        educational_background="phd",
        degree_field="computer-science",
        institution="MIT",
        preferred_format="online",
    )
    state = WizardState(current_step=3, role="educator", profile=profile)
    assert can_continue(state) is True


def test_step3_blocks_without_valid_role() -> None:
    assert can_continue(WizardState(current_step=3)) is False
    assert can_continue(WizardState(current_step=3, role="admin")) is False


def test_step3_blocks_on_mismatched_profile() -> None:
    """A profile of the other role never satisfies the guard."""
    profile = StudentProfile(
        academic_background="undergraduate", field_of_study="CS", learning_mode="hybrid"
    )
    state = WizardState(current_step=3, role="educator", profile=profile)
    assert can_continue(state) is False


def test_guard_tracks_later_edits() -> None:
    """The guard is recomputed from the state every time, never cached."""
    profile = StudentProfile(academic_background="undergraduate", learning_mode="hybrid")
    state = WizardState(current_step=3, role="student", profile=profile)
    assert can_continue(state) is False
    profile.field_of_study = "Math"
    assert can_continue(state) is True
    profile.learning_mode = ""
    assert can_continue(state) is False


def test_unknown_step_never_passes() -> None:
    assert can_continue(WizardState(current_step=4, discover_source="x")) is False
