#!/usr/bin/env python3
"""
Тесты источников синонимов
"""
import json
from unittest.mock import MagicMock, patch

import pytest

from data import synonyms as data_synonyms
from fias.synonyms import DictSynonymizer, NullSynonymizer, load_synonyms_file


def test_dict_synonymizer():
    synonymizer = DictSynonymizer({"ABC-1": ["Тверская 1", "", "Тверская 1", "Тверская д1"]})

    assert synonymizer.get_synonyms("abc-1") == ["Тверская 1", "Тверская д1"]
    assert synonymizer.get_synonyms("ABC-1") == ["Тверская 1", "Тверская д1"]
    assert synonymizer.get_synonyms("other") == []
    assert synonymizer.get_synonyms("") == []
    assert len(synonymizer) == 1


def test_synonyms_are_copied():
    synonymizer = DictSynonymizer({"a": ["x"]})
    synonymizer.get_synonyms("a").append("y")
    assert synonymizer.get_synonyms("a") == ["x"]


def test_null_synonymizer():
    assert NullSynonymizer().get_synonyms("abc") == []


def test_load_synonyms_file(tmp_path):
    path = tmp_path / "synonyms.json"
    path.write_text(json.dumps({"abc": ["Ленинская"]}, ensure_ascii=False), encoding="utf-8")

    assert load_synonyms_file(path).get_synonyms("abc") == ["Ленинская"]


def test_load_synonyms_file_requires_object(tmp_path):
    path = tmp_path / "synonyms.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_synonyms_file(path)


def test_load_mysql_synonyms():
    cursor = MagicMock()
    cursor.fetchmany.side_effect = [
        [{"fias_id": "abc", "name": " Ленинская "}, {"fias_id": "abc", "name": "Ленина"}],
        [{"fias_id": "def", "name": "Тверская"}],
        [],
    ]
    connection = MagicMock()
    connection.cursor.return_value = cursor

    with patch.object(data_synonyms.mysql.connector, "connect", return_value=connection):
        synonymizer = data_synonyms.load_mysql_synonyms("synonyms", {"host": "localhost"})

    assert synonymizer.get_synonyms("abc") == ["Ленинская", "Ленина"]
    assert synonymizer.get_synonyms("def") == ["Тверская"]
    connection.close.assert_called_once()


def test_create_synonymizer_from_file(tmp_path, monkeypatch):
    path = tmp_path / "synonyms.json"
    path.write_text(json.dumps({"abc": ["Ленинская"]}), encoding="utf-8")
    monkeypatch.setattr(data_synonyms.settings, "SYNONYMS_FILE", str(path))

    assert data_synonyms.create_synonymizer().get_synonyms("abc") == ["Ленинская"]


def test_create_synonymizer_default(monkeypatch):
    monkeypatch.setattr(data_synonyms.settings, "SYNONYMS_FILE", None)
    monkeypatch.setattr(data_synonyms.settings, "MYSQL_SYNONYMS_TABLE", None)

    assert isinstance(data_synonyms.create_synonymizer(), NullSynonymizer)
