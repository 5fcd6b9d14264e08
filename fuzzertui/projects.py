"""Creating and checking the on-disk layout of a fuzzing project."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

CORPUS_DIR = "corpus"
CRASHES_DIR = "crashes"
CONFIG_FILE = "config.json"
GRAMMAR_FILE = "grammar.json"


class ProjectError(Exception):
    """A project directory could not be created or is not a valid project."""


def create_project_structure(project_path: PathLike) -> None:
    """Create the corpus and crashes directories and empty configuration files.

    Existing configuration files are truncated.
    """
    root = Path(project_path)
    steps = [
        (root / CORPUS_DIR, "Failed to create corpus directory"),
        (root / CRASHES_DIR, "Failed to create crashes directory"),
    ]
    for directory, message in steps:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ProjectError(f"{message}: {exc}") from exc

    for name in (CONFIG_FILE, GRAMMAR_FILE):
        try:
            (root / name).write_bytes(b"")
        except OSError as exc:
            raise ProjectError(f"Failed to create {name}: {exc}") from exc


def validate_project_structure(project_path: PathLike) -> None:
    """Raise ProjectError naming the first part of the project that is missing."""
    root = Path(project_path)
    if not (root / CORPUS_DIR).is_dir():
        raise ProjectError("Corpus directory not found.")
    if not (root / CRASHES_DIR).is_dir():
        raise ProjectError("Crashes directory not found.")
    if not (root / CONFIG_FILE).is_file():
        raise ProjectError("config.json not found.")
    if not (root / GRAMMAR_FILE).is_file():
        raise ProjectError("grammar.json not found.")