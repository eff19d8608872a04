"""
Общие фикстуры и фабрики иерархии ГАР для тестов
"""
from datetime import date

import pytest

from fias import DictSynonymizer, create_default_builder

TODAY = date(2024, 1, 15)
FOREVER = "2079-06-06"

REGION_GUID = "0c5b2444-70a0-4932-980c-b4dc0d3f02b5"
CITY_GUID = "0c5b2444-70a0-4932-980c-b4dc0d3f02b5-city"
STREET_GUID = "9f1b6c3e-1a2b-4c5d-8e9f-000000000001"
HOUSE_GUID = "9f1b6c3e-1a2b-4c5d-8e9f-000000000002"
FLAT_GUID = "9f1b6c3e-1a2b-4c5d-8e9f-000000000003"
ROOM_GUID = "9f1b6c3e-1a2b-4c5d-8e9f-000000000004"


def param(type_id, value, start="2000-01-01", end=FOREVER):
    return {"type_id": type_id, "value": value, "start_date": start, "end_date": end}


def node(relation_type, data, active=True, actual=True, params=None):
    return {
        "relation": {
            "relation_type": relation_type,
            "relation_is_active": active,
            "relation_is_actual": actual,
            "relation_data": data,
        },
        "params": [{"values": params}] if params else [],
    }


def addr_obj(level, name, typename, guid, **kwargs):
    return node("addr_obj", {"objectguid": guid, "name": name, "typename": typename, "level": level}, **kwargs)


def house(guid=HOUSE_GUID, housenum="1", housetype=2, addnum1=None, addtype1=None,
          addnum2=None, addtype2=None, **kwargs):
    return node("house", {
        "objectguid": guid,
        "housenum": housenum,
        "housetype": housetype,
        "addnum1": addnum1,
        "addtype1": addtype1,
        "addnum2": addnum2,
        "addtype2": addtype2,
    }, **kwargs)


def apartment(guid=FLAT_GUID, number="5", aparttype=2, **kwargs):
    return node("apartment", {"objectguid": guid, "number": number, "aparttype": aparttype}, **kwargs)


def room(guid=ROOM_GUID, number="1", roomtype=1, **kwargs):
    return node("room", {"objectguid": guid, "number": number, "roomtype": roomtype}, **kwargs)


def region(name="Москва", typename="г", guid=REGION_GUID, **kwargs):
    return addr_obj(1, name, typename, guid, **kwargs)


def city(name="Химки", typename="г", guid=CITY_GUID, **kwargs):
    return addr_obj(5, name, typename, guid, **kwargs)


def street(name="Ленина", typename="ул", guid=STREET_GUID, **kwargs):
    return addr_obj(8, name, typename, guid, **kwargs)


def payload(*parents, hierarchy_id=1001, object_id=2002):
    return {"hierarchy_id": hierarchy_id, "object_id": object_id, "parents": list(parents)}


@pytest.fixture
def synonymizer():
    return DictSynonymizer({HOUSE_GUID: ["Ленина 1", "Ленина д1"], STREET_GUID: ["Ленинская"]})


@pytest.fixture
def builder(synonymizer):
    return create_default_builder(synonymizer, today=lambda: TODAY)
