"""
Уровни адресных объектов ГАР и их соответствие уровням адреса
"""
from enum import Enum, IntEnum

from .exceptions import MalformedInputError


class AddressLevel(IntEnum):
    """Уровень в итоговом адресе"""
    REGION = 0
    AREA = 1
    CITY = 2
    SETTLEMENT = 3
    STREET = 4
    HOUSE = 5
    FLAT = 6
    ROOM = 7
    STEAD = 8
    CAR_PLACE = 9


class FiasLevel(IntEnum):
    """Уровень адресного объекта в ГАР (OBJECTLEVELS)"""
    REGION = 1
    ADMINISTRATIVE_REGION = 2
    MUNICIPAL_DISTRICT = 3
    RURAL_URBAN_SETTLEMENT = 4
    CITY = 5
    SETTLEMENT = 6
    PLANNING_STRUCTURE_ELEMENT = 7
    ROAD_NETWORK_ELEMENT = 8
    STEAD = 9
    BUILDING = 10
    PREMISES = 11
    PREMISES_WITHIN_THE_PREMISES = 12
    AUTONOMOUS_REGION_LEVEL = 13
    INTRACITY_LEVEL = 14
    ADDITIONAL_TERRITORIES = 15
    OBJECTS_OF_ADDITIONAL_TERRITORIES = 16
    CAR_PLACE = 17


class RelationType(str, Enum):
    """Тип связи в иерархии ГАР"""
    ADDR_OBJ = "addr_obj"
    HOUSE = "house"
    APARTMENT = "apartment"
    ROOM = "room"
    CAR_PLACE = "carplace"
    STEAD = "stead"


FIAS_TO_ADDRESS_LEVEL = {
    FiasLevel.REGION: AddressLevel.REGION,
    FiasLevel.ADMINISTRATIVE_REGION: AddressLevel.AREA,
    FiasLevel.MUNICIPAL_DISTRICT: AddressLevel.AREA,
    FiasLevel.RURAL_URBAN_SETTLEMENT: AddressLevel.AREA,
    FiasLevel.CITY: AddressLevel.CITY,
    FiasLevel.SETTLEMENT: AddressLevel.SETTLEMENT,
    FiasLevel.PLANNING_STRUCTURE_ELEMENT: AddressLevel.SETTLEMENT,
    FiasLevel.ROAD_NETWORK_ELEMENT: AddressLevel.STREET,
    FiasLevel.STEAD: AddressLevel.STEAD,
    FiasLevel.BUILDING: AddressLevel.HOUSE,
    FiasLevel.PREMISES: AddressLevel.FLAT,
    FiasLevel.PREMISES_WITHIN_THE_PREMISES: AddressLevel.ROOM,
    FiasLevel.AUTONOMOUS_REGION_LEVEL: AddressLevel.AREA,
    FiasLevel.INTRACITY_LEVEL: AddressLevel.AREA,
    # СНТ, ГСК и прочие доп. территории попадают на уровень населенного пункта
    FiasLevel.ADDITIONAL_TERRITORIES: AddressLevel.SETTLEMENT,
    FiasLevel.OBJECTS_OF_ADDITIONAL_TERRITORIES: AddressLevel.STREET,
    FiasLevel.CAR_PLACE: AddressLevel.CAR_PLACE,
}

# Фиксированные уровни для связей, у которых нет собственного level
RELATION_FIAS_LEVELS = {
    RelationType.HOUSE: FiasLevel.BUILDING,
    RelationType.APARTMENT: FiasLevel.PREMISES,
    RelationType.ROOM: FiasLevel.PREMISES_WITHIN_THE_PREMISES,
    RelationType.CAR_PLACE: FiasLevel.CAR_PLACE,
    RelationType.STEAD: FiasLevel.STEAD,
}


def to_fias_level(value) -> FiasLevel:
    try:
        return FiasLevel(int(value))
    except (TypeError, ValueError):
        raise MalformedInputError(f'Unknown fias level "{value}"')


def map_fias_level(fias_level) -> AddressLevel:
    """Уровень адреса по уровню ГАР"""
    return FIAS_TO_ADDRESS_LEVEL[to_fias_level(fias_level)]
