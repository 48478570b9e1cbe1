"""Entry point: python -m onboarding. Exit codes in onboarding.constants."""

import sys
from pathlib import Path

from dotenv import load_dotenv

from core.logging_config import setup_logging
from core.navigation import RecordingNavigator
from core.session import Routes
from core.settings import get_setting, load_settings
from core.storage import FileStore
from onboarding.constants import ONBOARDING_LEFT, ONBOARDING_QUIT, ONBOARDING_SUCCESS
from onboarding.wizard import run_wizard


def main() -> int:
    """Run the onboarding wizard. Returns the process exit code."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    settings = load_settings(project_root / "config")
    setup_logging(project_root, settings)

    store = FileStore(
        project_root / get_setting(settings, "storage.file", "data/storage.json"),
        namespace=get_setting(settings, "storage.namespace", ""),
    )

    try:
        result = run_wizard(store, RecordingNavigator(), Routes.from_settings(settings))
    except KeyboardInterrupt:
        print("\n\nOnboarding cancelled.")
        return ONBOARDING_QUIT

    if result.success:
        print(f"\nAll set! Redirecting to {result.destination}\n")
        return ONBOARDING_SUCCESS

    if result.left:
        print(f"\nLeaving onboarding. Redirecting to {result.destination}\n")
        return ONBOARDING_LEFT

    print("\nOnboarding cancelled.")
    return ONBOARDING_QUIT


if __name__ == "__main__":
    sys.exit(main())
