from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


def write_script(path: Path, body: str) -> Path:
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def env_recorder_script(path: Path, output: Path) -> Path:
    """Script that appends the FEED_* environment it observed to ``output``.

    Unset variables are written as ``<unset>`` so they can be told apart
    from empty ones.
    """
    body = (
        f"{{\n"
        f'  printf "FEED_URL=%s\\n" "${{FEED_URL-<unset>}}"\n'
        f'  printf "FEED_GUID=%s\\n" "${{FEED_GUID-<unset>}}"\n'
        f'  printf "FEED_LINK=%s\\n" "${{FEED_LINK-<unset>}}"\n'
        f'  printf "FEED_TITLE=%s\\n" "${{FEED_TITLE-<unset>}}"\n'
        f'  printf "FEED_VARS=%s\\n" "$(env | grep "^FEED_" | cut -d= -f1 | sort | tr "\\n" ",")"\n'
        f'  echo "---"\n'
        f'}} >> "{output}"'
    )
    return write_script(path, body)


def read_env_records(output: Path) -> list[dict[str, str]]:
    if not output.exists():
        return []
    records: list[dict[str, str]] = []
    current: dict[str, str] = {}
    for line in output.read_text(encoding="utf-8").splitlines():
        if line == "---":
            records.append(current)
            current = {}
            continue
        key, _, value = line.partition("=")
        current[key] = value
    return records


def minimal_env() -> dict[str, str]:
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}
