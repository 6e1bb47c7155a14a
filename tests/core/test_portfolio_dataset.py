"""Portfolio Dataset — tests for loading the seed or a JSON file.

Tests cover:
    - Bundled seed loads and validates in full
    - JSON file in camelCase loads to the same dataset
    - Missing file, malformed JSON and naive datetimes raise DatasetLoadError
    - Accessors return immutable tuples of frozen models
"""

import json

import pytest
from pydantic import ValidationError

from portfolio_mcp.core.errors import DatasetLoadError
from portfolio_mcp.infrastructure.portfolio_dataset import load_dataset


def test_seed_counts(dataset):
    assert dataset.counts() == {
        "skills": 11, "projects": 3, "achievements": 3, "socialLinks": 5,
    }
    assert dataset.portfolio.id == "portfolio-gary"


def test_accessors_are_immutable(dataset):
    assert isinstance(dataset.skills, tuple)
    with pytest.raises(ValidationError):
        dataset.skills[0].proficiency = 1


def test_load_from_json_file(dataset, tmp_path):
    path = tmp_path / "portfolio.json"
    path.write_text(dataset.portfolio.model_dump_json(by_alias=True), encoding="utf-8")

    loaded = load_dataset(path)
    assert loaded.counts() == dataset.counts()
    assert loaded.projects[0].id == dataset.projects[0].id


def test_missing_file(tmp_path):
    with pytest.raises(DatasetLoadError) as info:
        load_dataset(tmp_path / "absent.json")
    assert info.value.code == "DATASET_LOAD_ERROR"


def test_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetLoadError):
        load_dataset(path)


def test_naive_datetime_rejected(dataset, tmp_path):
    raw = json.loads(dataset.portfolio.model_dump_json(by_alias=True))
    raw["createdAt"] = "2024-01-01T00:00:00"
    path = tmp_path / "naive.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    with pytest.raises(DatasetLoadError, match="naive.json"):
        load_dataset(path)
