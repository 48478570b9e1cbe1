"""Wizard state and the role-specific profile models.

The profile is a tagged union keyed by `role`: a state holds at most one
profile and its `role` always equals the state's role.
"""

from dataclasses import dataclass
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from onboarding.constants import FIRST_STEP

STUDENT = "student"
EDUCATOR = "educator"
VALID_ROLES = (STUDENT, EDUCATOR)


class _ProfileBase(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    # Fields that must be non-empty before Finish is enabled
    REQUIRED: ClassVar[tuple[str, ...]] = ()
    # Fields edited by tag toggling instead of assignment
    MULTI_SELECT: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def editable_fields(cls) -> tuple[str, ...]:
        return tuple(name for name in cls.model_fields if name != "role")

    def missing_required(self) -> list[str]:
        return [name for name in self.REQUIRED if not getattr(self, name)]


class StudentProfile(_ProfileBase):
    """Academic background of a student."""

    REQUIRED: ClassVar[tuple[str, ...]] = (
        "academic_background",
        "field_of_study",
        "learning_mode",
    )
    MULTI_SELECT: ClassVar[tuple[str, ...]] = ("interests",)

    role: Literal["student"] = STUDENT
    academic_background: str = ""
    institution: str = ""
    field_of_study: str = ""
    year: str = ""
    learning_mode: str = ""
    weekly_availability: str = ""
    interests: list[str] = Field(default_factory=list)
    graduation_year: str = ""


class EducatorProfile(_ProfileBase):
    """Teaching background of an educator."""

    REQUIRED: ClassVar[tuple[str, ...]] = (
        "educational_background",
        "degree_field",
        "institution",
        "preferred_format",
    )
    MULTI_SELECT: ClassVar[tuple[str, ...]] = ("collaboration_areas", "tools")

    role: Literal["educator"] = EDUCATOR
    educational_background: str = ""
    degree_field: str = ""
    institution: str = ""
    subjects: str = ""
    experience: str = ""
    preferred_format: str = ""
    collaboration_areas: list[str] = Field(default_factory=list)
    certifications: str = ""
    tools: list[str] = Field(default_factory=list)
    class_size: str = ""


Profile = Annotated[Union[StudentProfile, EducatorProfile], Field(discriminator="role")]

PROFILE_TYPES: dict[str, type[StudentProfile] | type[EducatorProfile]] = {
    STUDENT: StudentProfile,
    EDUCATOR: EducatorProfile,
}


def new_profile(role: str) -> StudentProfile | EducatorProfile | None:
    """Empty profile for role, or None when role is not a valid role."""
    cls = PROFILE_TYPES.get(role)
    return cls() if cls is not None else None


@dataclass
class WizardState:
    """Everything the user has entered so far. Created fresh on every run."""

    current_step: int = FIRST_STEP
    discover_source: str = ""
    role: str = ""
    profile: Profile | None = None

    @property
    def student_profile(self) -> StudentProfile | None:
        return self.profile if isinstance(self.profile, StudentProfile) else None

    @property
    def educator_profile(self) -> EducatorProfile | None:
        return self.profile if isinstance(self.profile, EducatorProfile) else None
