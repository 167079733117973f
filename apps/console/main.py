from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from apps.console.prompter import StdioPrompter
from clinic.core.exceptions import ClinicError
from clinic.core.log import LEVELS, configure_logging
from clinic.core.settings import load_settings
from clinic.directory import Directory
from clinic.session.app import ClinicApp


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Clinic records console.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVELS,
        help="Override CLINIC_LOG_LEVEL.",
    )
    parser.add_argument("--env-file", type=Path, help="Read settings from this .env file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(args.env_file)
        configure_logging(args.log_level or settings.log_level)
        directory = Directory(settings.bootstrap_username, settings.bootstrap_password)
        prompter = StdioPrompter()
        prompter.write(
            "Default admin account created: "
            f"username='{settings.bootstrap_username}', password='{settings.bootstrap_password}'"
        )
        return ClinicApp(directory, prompter, settings.max_patient_id).run()
    except ClinicError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
