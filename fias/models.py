"""
Модели данных: входная иерархия ГАР и итоговый адрес
"""
import json
from datetime import date
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from .levels import AddressLevel, FiasLevel, RelationType, RELATION_FIAS_LEVELS, to_fias_level


class NamePosition(str, Enum):
    """Положение сокращения типа относительно названия"""
    BEFORE = "before"  # г. Москва
    AFTER = "after"  # Московская обл.


class ParamType(IntEnum):
    """Типы параметров ГАР, которые попадают в адрес"""
    POSTAL_CODE = 5
    OKATO = 6
    OKTMO = 7
    KLADR = 10


class AddressLevelSpec(BaseModel):
    """Полное и краткое название типа для уровня адреса"""
    model_config = ConfigDict(frozen=True)

    level: AddressLevel
    name: str
    short_name: str
    name_position: NamePosition = NamePosition.BEFORE


# Входные данные

class TimedValue(BaseModel):
    """Значение параметра с периодом действия"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type_id: int
    value: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None  # None - бессрочно


class ParamGroup(BaseModel):
    values: List[TimedValue] = Field(default_factory=list)


class AddrObjData(BaseModel):
    objectguid: Optional[str] = None
    name: Optional[str] = None
    typename: Optional[str] = None
    level: int


class HouseData(BaseModel):
    objectguid: Optional[str] = None
    housenum: Optional[str] = None
    housetype: Optional[int] = None
    addnum1: Optional[str] = None
    addtype1: Optional[int] = None
    addnum2: Optional[str] = None
    addtype2: Optional[int] = None


class ApartmentData(BaseModel):
    objectguid: Optional[str] = None
    number: Optional[str] = None
    aparttype: Optional[int] = None


class RoomData(BaseModel):
    objectguid: Optional[str] = None
    number: Optional[str] = None
    roomtype: Optional[int] = None


class SteadData(BaseModel):
    objectguid: Optional[str] = None
    number: Optional[str] = None


class CarPlaceData(BaseModel):
    objectguid: Optional[str] = None
    number: Optional[str] = None


RelationData = Union[AddrObjData, HouseData, ApartmentData, RoomData, SteadData, CarPlaceData]

RELATION_DATA_MODELS = {
    RelationType.ADDR_OBJ: AddrObjData,
    RelationType.HOUSE: HouseData,
    RelationType.APARTMENT: ApartmentData,
    RelationType.ROOM: RoomData,
    RelationType.STEAD: SteadData,
    RelationType.CAR_PLACE: CarPlaceData,
}


class Relation(BaseModel):
    relation_type: RelationType
    relation_is_active: bool
    relation_is_actual: bool
    relation_data: RelationData

    @model_validator(mode="before")
    @classmethod
    def _parse_relation_data(cls, values: Any) -> Any:
        # Структура relation_data зависит от relation_type
        if not isinstance(values, dict):
            return values
        try:
            relation_type = RelationType(values.get("relation_type"))
        except ValueError:
            return values
        data = values.get("relation_data")
        if isinstance(data, dict):
            values = dict(values)
            values["relation_data"] = RELATION_DATA_MODELS[relation_type].model_validate(data)
        return values


class HierarchyNode(BaseModel):
    """Одна версия одного элемента адресной иерархии"""
    relation: Relation
    params: List[ParamGroup] = Field(default_factory=list)

    @field_validator("params", mode="before")
    @classmethod
    def _empty_params(cls, value: Any) -> Any:
        return value or []

    @property
    def is_live(self) -> bool:
        return self.relation.relation_is_active and self.relation.relation_is_actual

    @property
    def relation_type(self) -> RelationType:
        return self.relation.relation_type

    @property
    def data(self) -> RelationData:
        return self.relation.relation_data

    @property
    def fias_level(self) -> FiasLevel:
        if self.relation_type == RelationType.ADDR_OBJ:
            return to_fias_level(self.data.level)
        return RELATION_FIAS_LEVELS[self.relation_type]

    def params_by_type(self) -> Dict[int, List[TimedValue]]:
        res: Dict[int, List[TimedValue]] = {}
        for group in self.params:
            for value in group.values:
                res.setdefault(value.type_id, []).append(value)
        return res


class HierarchyPayload(BaseModel):
    """Данные для построения одного адреса"""
    hierarchy_id: int
    object_id: int
    parents: List[HierarchyNode]

    @field_validator("parents", mode="before")
    @classmethod
    def _decode_parents(cls, value: Any) -> Any:
        # из MySQL parents приходит JSON строкой
        if isinstance(value, (str, bytes)):
            return json.loads(value)
        return value


# Итоговый адрес

class AddressObject(BaseModel):
    """Регион, район, город, населенный пункт или улица"""
    fias_id: Optional[str] = None
    kladr_id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    type_full: Optional[str] = None
    name_position: NamePosition = NamePosition.BEFORE
    renaming: List[str] = Field(default_factory=list)


class HouseBlock(BaseModel):
    """Корпус, строение, литера"""
    number: Optional[str] = None
    type: Optional[str] = None
    type_full: Optional[str] = None


class House(BaseModel):
    fias_id: Optional[str] = None
    kladr_id: Optional[str] = None
    number: Optional[str] = None
    type: Optional[str] = None
    type_full: Optional[str] = None
    block1: Optional[HouseBlock] = None
    block2: Optional[HouseBlock] = None


class Unit(BaseModel):
    """Квартира или комната"""
    fias_id: Optional[str] = None
    number: Optional[str] = None
    type: Optional[str] = None
    type_full: Optional[str] = None


ADDRESS_LEVEL_FIELDS = {
    AddressLevel.REGION: "region",
    AddressLevel.AREA: "area",
    AddressLevel.CITY: "city",
    AddressLevel.SETTLEMENT: "settlement",
    AddressLevel.STREET: "street",
    AddressLevel.HOUSE: "house",
    AddressLevel.FLAT: "flat",
    AddressLevel.ROOM: "room",
}


class Address(BaseModel):
    """
    Адрес, собранный из иерархии ГАР.

    Адрес можно передать в сборщик повторно: каждый проход заменяет только части
    тех уровней, которые он обработал, и итоговые поля последнего уровня.
    Части остальных уровней не очищаются.
    """
    region: Optional[AddressObject] = None
    area: Optional[AddressObject] = None
    city: Optional[AddressObject] = None
    settlement: Optional[AddressObject] = None
    street: Optional[AddressObject] = None
    house: Optional[House] = None
    flat: Optional[Unit] = None
    room: Optional[Unit] = None

    # данные последнего уровня
    fias_id: Optional[str] = None
    address_level: Optional[AddressLevel] = None
    fias_level: Optional[FiasLevel] = None
    fias_hierarchy_id: Optional[int] = None
    kladr_id: Optional[str] = None
    okato: Optional[str] = None
    oktmo: Optional[str] = None
    postal_code: Optional[str] = None
    synonyms: List[str] = Field(default_factory=list)

    def get_part(self, level: AddressLevel):
        return getattr(self, ADDRESS_LEVEL_FIELDS[level])

    def set_part(self, level: AddressLevel, part) -> None:
        setattr(self, ADDRESS_LEVEL_FIELDS[level], part)

    @computed_field
    @property
    def renaming(self) -> List[str]:
        """Прежние названия по всем уровням"""
        res: List[str] = []
        for part in (self.region, self.area, self.city, self.settlement, self.street):
            if part is not None:
                res.extend(part.renaming)
        return res
