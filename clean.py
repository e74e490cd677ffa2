#!/usr/bin/env python3
"""Remove build artefacts and caches from the project tree.

Pass a data directory to also delete temporary files left behind by an
interrupted save.
"""

from pathlib import Path
import shutil
import sys

PROJECT_ROOT = Path(__file__).resolve().parent


def ensure_safe_root(root: Path) -> None:
    """Prevent accidental deletion outside project directory."""
    if not (root / "pyproject.toml").exists():
        print("Error: clean.py must be run on a python project root.")
        sys.exit(1)


def remove_path(path: Path) -> None:
    """Remove a file or directory, reporting failures."""
    try:
        if path.is_dir():
            shutil.rmtree(path)
            print(f"Removed directory: {path}")
        elif path.exists():
            path.unlink()
            print(f"Removed file: {path}")
    except OSError as e:
        print(f"Failed to remove {path}: {e}")


def clean_data_dir(data_dir: Path) -> None:
    """Delete ``*.json.tmp`` files of unfinished saves."""
    if not data_dir.is_dir():
        print(f"Not a directory: {data_dir}")
        return
    for path in data_dir.glob("*.json.tmp"):
        remove_path(path)


def main() -> None:
    ensure_safe_root(PROJECT_ROOT)

    print(f"Cleaning project at: {PROJECT_ROOT}")
    print("-" * 40)

    for folder in ["build", "dist"]:
        remove_path(PROJECT_ROOT / folder)

    for egg_info in (PROJECT_ROOT / "src").glob("*.egg-info"):
        remove_path(egg_info)

    for path in PROJECT_ROOT.rglob("__pycache__"):
        remove_path(path)

    for cache in [".pytest_cache", ".mypy_cache"]:
        remove_path(PROJECT_ROOT / cache)

    for arg in sys.argv[1:]:
        clean_data_dir(Path(arg).expanduser())

    print("-" * 40)
    print("Clean complete.")


if __name__ == "__main__":
    main()
