"""
Tests for the in-memory catalog repository.
"""

import json

import pytest

from cafe_catalog.config import Settings
from cafe_catalog.protocols import CatalogProvider
from cafe_catalog.repositories import DEFAULT_CATALOG, InMemoryCatalogRepository


def test_satisfies_protocol(catalog):
    assert isinstance(catalog, CatalogProvider)


def test_lookup(catalog):
    assert list(catalog.get_cafes("tula")) == ["Тульский пряник", "Самовар"]
    assert catalog.get_cafes("omsk") is None
    assert catalog.has_city("moscow")
    assert not catalog.has_city("Moscow")
    assert catalog.cities() == ["moscow", "tula", "empty"]


def test_source_mapping_is_copied():
    source = {"tula": ["Самовар"]}
    repo = InMemoryCatalogRepository(source)
    source["tula"].append("Новое кафе")
    source["omsk"] = ["Сибирь"]
    assert list(repo.get_cafes("tula")) == ["Самовар"]
    assert not repo.has_city("omsk")


def test_catalog_is_read_only(catalog):
    with pytest.raises(TypeError):
        catalog._catalog["omsk"] = ("Сибирь",)


def test_create_defaults_to_builtin_catalog():
    repo = InMemoryCatalogRepository.create()
    assert repo.cities() == list(DEFAULT_CATALOG)
    assert list(repo.get_cafes("moscow")) == DEFAULT_CATALOG["moscow"]


def test_create_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"kazan": ["Чак-чак", "Эчпочмак"]}, ensure_ascii=False), encoding="utf-8")

    repo = InMemoryCatalogRepository.create(catalog_file=path)
    assert repo.cities() == ["kazan"]
    assert list(repo.get_cafes("kazan")) == ["Чак-чак", "Эчпочмак"]


@pytest.mark.parametrize(
    "content",
    ["not json", "[]", '{"kazan": "Чак-чак"}', '{"kazan": [1, 2]}'],
)
def test_from_json_file_rejects_bad_shape(tmp_path, content):
    path = tmp_path / "catalog.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        InMemoryCatalogRepository.from_json_file(path)


def test_from_json_file_missing(tmp_path):
    with pytest.raises(ValueError, match="Failed to load catalog"):
        InMemoryCatalogRepository.from_json_file(tmp_path / "missing.json")


def test_create_reads_catalog_file_from_settings(tmp_path, monkeypatch):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"omsk": ["Сибирь"]}, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setattr(
        "cafe_catalog.repositories.in_memory_catalog.settings",
        Settings(catalog_file=str(path)),
    )

    repo = InMemoryCatalogRepository.create()
    assert repo.cities() == ["omsk"]
    assert list(repo.get_cafes("omsk")) == ["Сибирь"]
