#!/usr/bin/env python3
"""
Run linting checks on the GitHub MCP server codebase.
"""
import argparse
import logging
import subprocess
import sys
from pathlib import Path

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("github-mcp-lint")

# Root directory of the project
ROOT_DIR = Path(__file__).parent.parent.absolute()

# Directories to check
CHECK_DIRS = [
    ROOT_DIR / "src",
    ROOT_DIR / "tests",
    ROOT_DIR / "scripts",
]


def python_files(dirs):
    """Collect Python files under the given directories, skipping caches."""
    files = []
    for dir_path in dirs:
        if not dir_path.exists():
            continue
        files.extend(
            path
            for path in sorted(dir_path.rglob("*.py"))
            if "__pycache__" not in path.parts
        )
    return files


def run_command(cmd, description):
    """Run a command and return whether it succeeded."""
    logger.info(f"{description}...")
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
        logger.info(f"✅ {description} passed!")
        return True
    except subprocess.CalledProcessError as e:
        logger.error(f"❌ {description} failed!")
        logger.error(e.stdout)
        logger.error(e.stderr)
        return False


def run_linting(dirs, auto_fix=False):
    """Run black, flake8 and mypy, optionally formatting first."""
    files = [str(f) for f in python_files(dirs)]
    logger.info(f"Found {len(files)} Python files to check")

    if not files:
        logger.warning("No Python files found to check!")
        return 0

    if auto_fix:
        run_command(["black"] + files, "Black formatting")

    checks = [
        (["black", "--check"] + files, "Black format checking"),
        (["flake8", "--max-line-length", "100"] + files, "Flake8 linting"),
        (
            ["mypy", "--explicit-package-bases", "--ignore-missing-imports"] + files,
            "Mypy type checking",
        ),
    ]
    results = [run_command(cmd, description) for cmd, description in checks]

    if all(results):
        logger.info("✅ All linting checks passed!")
        return 0

    logger.error("❌ Some linting checks failed.")
    return 1


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run linting checks on the GitHub MCP server codebase."
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Format files with black before checking",
    )
    parser.add_argument(
        "--dirs", nargs="+", help="Directories to check (default: src tests scripts)"
    )

    args = parser.parse_args()
    dirs = [Path(d) for d in args.dirs] if args.dirs else CHECK_DIRS

    return run_linting(dirs, auto_fix=args.fix)


if __name__ == "__main__":
    sys.exit(main())
