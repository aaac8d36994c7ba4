#!/usr/bin/env python3
"""
Run the namebridge checks locally using the ACTIVE virtual environment.

Steps, in order:
  1) uv sync --all-extras --dev [--frozen if uv.lock exists]   (skip with --no-sync)
  2) black --check at line length 120 on the package and scripts
  3) mypy --ignore-missing-imports on the package and scripts
  4) pytest tests/ with coverage of the package and PYTHONPATH=.

Every command runs from the repository root (the directory holding pyproject.toml).
"""

import argparse
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

PACKAGE = "namebridge"
BLACK_VERSION = "24.8.0"
LINE_LENGTH = "120"
COVERAGE_FLOOR = "40"


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def uv_exe() -> List[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: List[str], *, env: Optional[Dict[str, str]] = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def script_paths() -> List[str]:
    return [str(p.relative_to(REPO)) for p in sorted((REPO / "scripts").glob("*.py"))]


def sync() -> None:
    args = ["sync", "--active", "--all-extras", "--dev"]
    if (REPO / "uv.lock").exists():
        args.append("--frozen")
    run(uv_exe() + args)


def check_formatting() -> None:
    targets = [PACKAGE] + script_paths()
    uvx_path = shutil.which("uvx")
    if uvx_path:
        run([uvx_path, "--from", f"black=={BLACK_VERSION}", "black", *targets, "--check", "--line-length", LINE_LENGTH])
    else:
        run(uv_exe() + ["run", "--active", "black", *targets, "--check", "--line-length", LINE_LENGTH])


def check_types() -> None:
    run(uv_exe() + ["run", "--active", "mypy", PACKAGE, "--ignore-missing-imports"])
    scripts = script_paths()
    if scripts:
        run(uv_exe() + ["run", "--active", "mypy", *scripts, "--ignore-missing-imports"])


def run_tests() -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv_exe()
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            f"--cov={PACKAGE}",
            "--cov-report=term-missing",
            f"--cov-fail-under={COVERAGE_FLOOR}",
        ],
        env=env,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Run formatting, type and test checks locally.")
    parser.add_argument("--no-sync", action="store_true", help="Skip installing dependencies with uv.")
    args = parser.parse_args()

    if not args.no_sync:
        sync()
    check_formatting()
    check_types()
    run_tests()

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
