#!/usr/bin/env python3
"""
Тесты ETL без подключения к MySQL и Elasticsearch
"""
import json
from unittest.mock import MagicMock, patch

import pytest

from config import settings
from conftest import HOUSE_GUID, STREET_GUID, house, payload, region, street
from data.etl import FiasETL, INDEX_MAPPING


@pytest.fixture
def es():
    return MagicMock()


@pytest.fixture
def etl(builder, es):
    return FiasETL(builder=builder, es=es)


def mysql_row(*parents, hierarchy_id=1, object_id=2):
    # parents в таблице иерархии хранится JSON строкой
    row = payload(*parents, hierarchy_id=hierarchy_id, object_id=object_id)
    row["parents"] = json.dumps(row["parents"], ensure_ascii=False)
    return row


def test_documents(etl):
    rows = [
        mysql_row(region(), street(), house()),
        mysql_row(region(), street(), object_id=3),
    ]

    docs = list(etl.iter_documents(rows))

    assert [d["_id"] for d in docs] == [HOUSE_GUID, STREET_GUID]
    assert docs[0]["_index"] == settings.ES_INDEX
    source = docs[0]["_source"]
    assert source["full_address"] == "г. Москва, ул. Ленина, д. 1"
    assert source["synonyms"] == ["Ленина 1", "Ленина д1"]
    assert source["house"]["number"] == "1"
    assert source["address_level"] == 5
    assert etl.built_count == 2
    assert etl.failed_count == 0


def test_failed_rows_are_skipped(etl):
    rows = [
        mysql_row(region(), street("Ленина"), street("Сталина")),
        mysql_row(region(), house(housetype=50000)),
        {"hierarchy_id": 1, "object_id": 4, "parents": "{not json"},
        mysql_row(region(), street()),
    ]

    docs = list(etl.iter_documents(rows))

    assert [d["_id"] for d in docs] == [STREET_GUID]
    assert etl.failed_count == 3
    assert etl.built_count == 1


def test_create_index_recreates_existing(etl, es):
    es.indices.exists.side_effect = [True, False]

    assert etl.create_index() is True

    es.indices.delete.assert_called_once_with(index=settings.ES_INDEX)
    es.indices.create.assert_called_once_with(
        index=settings.ES_INDEX,
        mappings=INDEX_MAPPING["mappings"],
        settings=INDEX_MAPPING["settings"],
    )


def test_create_index_keeps_existing(builder, es):
    etl = FiasETL(recreate_index=False, builder=builder, es=es)
    es.indices.exists.return_value = True

    assert etl.create_index() is True

    es.indices.delete.assert_not_called()
    es.indices.create.assert_not_called()


def test_create_index_error(etl, es):
    es.indices.exists.side_effect = RuntimeError("connection refused")
    assert etl.create_index() is False


def test_load_data(etl, es):
    rows = [mysql_row(region(), street()), mysql_row(region(), street("Ленина"), street("Сталина"))]

    with patch.object(FiasETL, "iter_payload_rows", return_value=iter(rows)), \
            patch("data.etl.bulk", return_value=(1, [])) as bulk_mock:
        assert etl.load_data() is True
        docs = list(bulk_mock.call_args[0][1])

    assert [d["_id"] for d in docs] == [STREET_GUID]
    assert etl.failed_count == 1
    es.indices.refresh.assert_called_once_with(index=settings.ES_INDEX)


def test_run_etl_without_elasticsearch(etl, es):
    es.ping.return_value = False
    assert etl.run_etl() is False
    es.indices.create.assert_not_called()
