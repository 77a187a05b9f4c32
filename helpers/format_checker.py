import logging
import argparse
import subprocess
import sys
from typing import List, Optional

from helpers.project_paths import HELPERS, PROJECT_ROOT, RESOURCES, TESTS

# Configure logging format
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# Source folders of this project
TARGET_FOLDERS = (HELPERS, RESOURCES, TESTS)

# Maximum line length for flake8 and black
MAX_LINE_LENGTH = 148


def get_target_folders() -> List[str]:
    """Existing project source folders, relative to the project root"""
    return sorted(str(p.relative_to(PROJECT_ROOT)) for p in TARGET_FOLDERS if p.is_dir())


def build_commands(folders: List[str], fix: bool = False) -> List[List[str]]:
    """flake8 always runs; black rewrites files with --fix and only reports otherwise"""
    cmd_flake = ["flake8", "--count", f"--max-line-length={MAX_LINE_LENGTH}", "--ignore=W503"] + folders
    cmd_black = ["black", f"--line-length={MAX_LINE_LENGTH}"] + ([] if fix else ["--check", "--diff"]) + folders
    return [cmd_black, cmd_flake]


def run_command(command: List[str]) -> int:
    """Execute a shell command from the project root and return its exit code"""
    result = subprocess.run(command, capture_output=True, text=True, check=False, cwd=PROJECT_ROOT)
    if result.returncode != 0:
        logger.warning("Command failed: %s", " ".join(command))
        logger.warning(result.stdout + result.stderr)
    else:
        logger.info(result.stdout)
    return result.returncode


def format_check(fix: bool = False) -> int:
    """Run format checks using Black and Flake8; returns the first non-zero exit code"""
    folders = get_target_folders()
    if not folders:
        logger.warning("No folders found for format checking. Please check your project structure.")
        return 0

    logger.info("Target folders for format checking: %s", folders)
    status = 0
    for command in build_commands(folders, fix=fix):
        code = run_command(command)
        status = status or code
    return status


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Code format checker (Flake8 + Black)")
    parser.add_argument("--fix", action="store_true", help="Automatically fix formatting issues")
    args = parser.parse_args(argv)
    return format_check(fix=args.fix)


if __name__ == "__main__":
    sys.exit(main())
