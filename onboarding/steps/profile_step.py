"""Step 3: role-specific background.

Each role has a table of prompts. Required fields are asked without a "Leave empty"
entry, but nothing here enforces them: Finish stays disabled until the
guard passes.
"""

from dataclasses import dataclass

import questionary
from questionary import Choice

from onboarding import options
from onboarding.machine import OnboardingWizard
from onboarding.state import EDUCATOR, STUDENT
from onboarding.ui import STYLE, choices_for, default_for

_SELECT = "select"
_TEXT = "text"
_TAGS = "tags"


@dataclass(frozen=True)
class _FieldPrompt:
    name: str
    kind: str
    message: str
    choices: list[tuple[str, str]] | None = None
    optional: bool = True


_STUDENT_PROMPTS = [
    _FieldPrompt(
        "academic_background", _SELECT, "Academic background:",
        options.ACADEMIC_BACKGROUNDS, optional=False,
    ),
    _FieldPrompt("institution", _TEXT, "Institution name (e.g. University of Example):"),
    _FieldPrompt(
        "field_of_study", _TEXT, "Field of study (e.g. Computer Science):", optional=False
    ),
    _FieldPrompt("year", _SELECT, "Current year / level:", options.STUDY_YEARS),
    _FieldPrompt(
        "learning_mode", _SELECT, "Preferred learning mode:",
        options.LEARNING_MODES, optional=False,
    ),
    _FieldPrompt(
        "weekly_availability", _SELECT, "Weekly availability:", options.WEEKLY_AVAILABILITY
    ),
    _FieldPrompt(
        "graduation_year", _SELECT, "Expected graduation year:", options.GRADUATION_YEARS
    ),
    _FieldPrompt("interests", _TAGS, "Interests / learning goals:", options.INTERESTS),
]

_EDUCATOR_PROMPTS = [
    _FieldPrompt(
        "educational_background", _SELECT, "Highest educational background:",
        options.EDUCATIONAL_BACKGROUNDS, optional=False,
    ),
    _FieldPrompt(
        "degree_field", _SELECT, "Primary degree field:",
        options.DEGREE_FIELDS, optional=False,
    ),
    _FieldPrompt(
        "institution", _TEXT, "Institution / organization (e.g. Example Institute):",
        optional=False,
    ),
    _FieldPrompt("subjects", _TEXT, "Subjects taught (e.g. Programming, Data Science):"),
    _FieldPrompt(
        "experience", _SELECT, "Years of teaching experience:", options.TEACHING_EXPERIENCE
    ),
    _FieldPrompt(
        "preferred_format", _SELECT, "Preferred class format:",
        options.CLASS_FORMATS, optional=False,
    ),
    _FieldPrompt(
        "collaboration_areas", _TAGS, "Collaboration areas:", options.COLLABORATION_AREAS
    ),
    _FieldPrompt("certifications", _TEXT, "Certifications (optional, e.g. PGCE, CELTA):"),
    _FieldPrompt("class_size", _SELECT, "Typical class size:", options.CLASS_SIZES),
    _FieldPrompt("tools", _TAGS, "Tools you use:", options.TEACHING_TOOLS),
]

_PROMPTS = {STUDENT: _STUDENT_PROMPTS, EDUCATOR: _EDUCATOR_PROMPTS}


def run_profile_step(wizard: OnboardingWizard) -> bool:
    """Ask every profile field for the selected role. Returns False if cancelled."""
    prompts = _PROMPTS.get(wizard.state.role)
    if prompts is None or wizard.state.profile is None:
        print("No role selected yet. Go back to step 2 to choose one.\n")
        return True

    for prompt in prompts:
        if prompt.kind == _TAGS:
            if not _ask_tags(wizard, prompt):
                return False
            continue
        value = _ask_value(wizard, prompt)
        if value is None:
            return False
        wizard.set_field(prompt.name, value)
    return True


def _ask_value(wizard: OnboardingWizard, prompt: _FieldPrompt) -> str | None:
    current = getattr(wizard.state.profile, prompt.name)
    if prompt.kind == _TEXT:
        answer = questionary.text(prompt.message, default=current, style=STYLE).ask()
        return answer.strip() if answer is not None else None
    return questionary.select(
        prompt.message,
        choices=choices_for(prompt.choices or [], optional=prompt.optional),
        default=default_for(prompt.choices or [], current),
        style=STYLE,
    ).ask()


def _ask_tags(wizard: OnboardingWizard, prompt: _FieldPrompt) -> bool:
    """Checkbox prompt; differences from the current selection become toggles."""
    current: list[str] = getattr(wizard.state.profile, prompt.name)
    picked = questionary.checkbox(
        prompt.message,
        choices=[
            Choice(label, value, checked=value in current)
            for label, value in prompt.choices or []
        ],
        style=STYLE,
    ).ask()
    if picked is None:
        return False
    for _, value in prompt.choices or []:
        if (value in picked) != (value in current):
            wizard.toggle_tag(prompt.name, value)
    return True
