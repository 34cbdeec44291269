# =========================================
# copy_public.py
# =========================================
# Summary:
# - Reads:  public/ (flat files, non-recursive)
# - Writes: dist/<same names>
#
# - public/ is listed before dist/ is touched, so a missing source
#   fails without creating or writing anything
# - Creates dist/ if it is missing
# - Existing files in dist/ with the same name are overwritten
# - Any failure aborts the run; already-copied files are left in place
# - Silent on success
# =========================================

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List


SOURCE_DIR_NAME = "public"
DEST_DIR_NAME = "dist"


def ensure_destination_exists(dest_dir: Path) -> None:
    dest_dir.mkdir(exist_ok=True)


def list_entries(source_dir: Path) -> List[str]:
    if not source_dir.exists():
        raise FileNotFoundError(f"Missing source directory: {source_dir}")
    # Sorted for stable runs; the copy itself does not depend on order
    return sorted(p.name for p in source_dir.iterdir())


def copy_entry(source_dir: Path, dest_dir: Path, entry_name: str) -> Path:
    dst = dest_dir / entry_name
    shutil.copy2(source_dir / entry_name, dst)
    return dst


def copy_public(source_dir: Path, dest_dir: Path) -> List[Path]:
    entries = list_entries(source_dir)
    ensure_destination_exists(dest_dir)
    return [copy_entry(source_dir, dest_dir, name) for name in entries]


def main() -> None:
    repo_root = Path(".")
    copy_public(repo_root / SOURCE_DIR_NAME, repo_root / DEST_DIR_NAME)


if __name__ == "__main__":
    main()
