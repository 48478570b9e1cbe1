"""Exit codes of `python -m onboarding` and the wizard's step layout."""

ONBOARDING_SUCCESS = 0  # Role persisted, user redirected to a dashboard
ONBOARDING_QUIT = 1  # User cancelled (Ctrl+C, Quit)
ONBOARDING_LEFT = 2  # User left through Skip or Back to home

STEP_DISCOVER = 1
STEP_ROLE = 2
STEP_PROFILE = 3

FIRST_STEP = STEP_DISCOVER
LAST_STEP = STEP_PROFILE

# step -> (title, description)
STEPS: dict[int, tuple[str, str]] = {
    STEP_DISCOVER: ("Where to find us", "Tell us where you discovered Hexon"),
    STEP_ROLE: ("Your role", "Select whether you are a student or an educator"),
    STEP_PROFILE: (
        "Background",
        "Provide academic or educational background based on your role",
    ),
}
