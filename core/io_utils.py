from __future__ import annotations
import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class DirEntry:
    name: str
    is_dir: bool


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


# newline="" on both sides so file bodies round-trip unchanged (no \r\n translation).
def read_text(path: str) -> str:
    # undecodable bytes become U+FFFD instead of failing the read
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def list_dir(path: str) -> List[DirEntry]:
    with os.scandir(path) as it:
        entries = [DirEntry(name=e.name, is_dir=e.is_dir()) for e in it]
    entries.sort(key=lambda e: e.name)
    return entries
