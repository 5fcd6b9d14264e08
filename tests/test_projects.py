from pathlib import Path

import pytest

from fuzzertui.projects import (
    ProjectError,
    create_project_structure,
    validate_project_structure,
)


def _make_valid(project: Path) -> None:
    (project / "corpus").mkdir(parents=True)
    (project / "crashes").mkdir(parents=True)
    (project / "config.json").touch()
    (project / "grammar.json").touch()


def test_create_project_structure_success(tmp_path):
    project = tmp_path / "test_project"
    project.mkdir()
    create_project_structure(project)
    assert (project / "corpus").is_dir()
    assert (project / "crashes").is_dir()
    assert (project / "config.json").is_file()
    assert (project / "grammar.json").is_file()


def test_create_makes_missing_project_directory(tmp_path):
    project = tmp_path / "nested" / "project"
    create_project_structure(project)
    assert (project / "corpus").is_dir()


def test_create_truncates_existing_config(tmp_path):
    project = tmp_path / "p"
    project.mkdir()
    (project / "config.json").write_text("{\"old\": 1}")
    create_project_structure(project)
    assert (project / "config.json").read_text() == ""


def test_create_then_validate_round_trip(tmp_path):
    project = tmp_path / "round"
    create_project_structure(str(project))
    assert validate_project_structure(project) is None


def test_create_fails_when_path_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(ProjectError) as info:
        create_project_structure(blocker)
    assert str(info.value).startswith("Failed to create corpus directory:")


def test_validate_project_structure_success(tmp_path):
    project = tmp_path / "valid_project"
    _make_valid(project)
    assert validate_project_structure(project) is None


def test_validate_project_structure_missing_corpus(tmp_path):
    project = tmp_path / "invalid_project"
    project.mkdir()
    (project / "crashes").mkdir()
    (project / "config.json").touch()
    (project / "grammar.json").touch()
    with pytest.raises(ProjectError) as info:
        validate_project_structure(project)
    assert str(info.value) == "Corpus directory not found."


def test_validate_project_structure_missing_config_file(tmp_path):
    project = tmp_path / "invalid_project_config"
    (project / "corpus").mkdir(parents=True)
    (project / "crashes").mkdir()
    (project / "grammar.json").touch()
    with pytest.raises(ProjectError) as info:
        validate_project_structure(project)
    assert str(info.value) == "config.json not found."


def test_validate_missing_crashes(tmp_path):
    project = tmp_path / "p"
    _make_valid(project)
    (project / "crashes").rmdir()
    with pytest.raises(ProjectError, match="^Crashes directory not found.$"):
        validate_project_structure(project)


def test_validate_missing_grammar(tmp_path):
    project = tmp_path / "p"
    _make_valid(project)
    (project / "grammar.json").unlink()
    with pytest.raises(ProjectError, match="^grammar.json not found.$"):
        validate_project_structure(project)


def test_validate_rejects_directory_in_place_of_config(tmp_path):
    project = tmp_path / "p"
    _make_valid(project)
    (project / "config.json").unlink()
    (project / "config.json").mkdir()
    with pytest.raises(ProjectError, match="config.json not found"):
        validate_project_structure(project)