"""
Сборка адреса из иерархии ГАР
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from .comparator import ActualityComparator
from .exceptions import AddressBuildFailedError, MalformedInputError, UnsupportedAddressLevelError
from .levels import AddressLevel, FiasLevel, map_fias_level
from .models import (
    Address,
    AddressObject,
    AddrObjData,
    ApartmentData,
    HierarchyNode,
    HierarchyPayload,
    House,
    HouseBlock,
    HouseData,
    ParamType,
    RoomData,
    TimedValue,
    Unit,
)
from .resolvers import (
    AddressLevelSpecResolver,
    AddHouseTypeSpecResolver,
    AddrObjTypeSpecResolver,
    ApartmentTypeSpecResolver,
    HouseTypeSpecResolver,
    RoomTypeSpecResolver,
)
from .synonyms import AddressSynonymizer, NullSynonymizer

logger = logging.getLogger(__name__)

ACTUAL_PARAM_TYPES = (ParamType.KLADR, ParamType.OKATO, ParamType.OKTMO, ParamType.POSTAL_CODE)


def prepare_string(s: Optional[str]) -> Optional[str]:
    """Обрезка пробелов, пустая строка -> None"""
    if s is None:
        return None
    tmp = s.strip()
    return tmp or None


def type_code(value: Optional[int]) -> int:
    # отсутствующий код типа считаем нулевым ("не определено")
    return 0 if value is None else int(value)


@dataclass
class LevelContext:
    """Данные одного уровня иерархии для обработчика"""
    object_id: int
    fias_level: FiasLevel
    address_level: AddressLevel
    node: HierarchyNode
    items: List[HierarchyNode]
    params: Dict[int, TimedValue] = field(default_factory=dict)

    def param(self, param_type: ParamType) -> Optional[str]:
        value = self.params.get(param_type)
        return value.value if value is not None else None

    def data(self, expected: type):
        data = self.node.data
        if not isinstance(data, expected):
            raise MalformedInputError(
                f'Relation "{self.node.relation_type.value}" can not be placed on fias level {int(self.fias_level)}'
            )
        return data


class LevelHandler:
    """Заполняет поля адреса для одного уровня, возвращает fias_id уровня"""

    def assign(self, address: Address, ctx: LevelContext) -> Optional[str]:
        raise NotImplementedError


class AddrObjLevelHandler(LevelHandler):
    """Регион, район, город, населенный пункт, улица"""

    def __init__(self, level: AddressLevel, resolver: AddressLevelSpecResolver, required: bool = False):
        self.level = level
        self.resolver = resolver
        self.required = required

    def assign(self, address: Address, ctx: LevelContext) -> Optional[str]:
        data = ctx.data(AddrObjData)
        fias_id = prepare_string(data.objectguid)
        name = prepare_string(data.name)

        if self.required:
            level_name = self.level.name.lower()
            if not fias_id:
                raise AddressBuildFailedError.with_identifier(
                    'object_id', ctx.object_id, f'Empty fiasId for {level_name} level.'
                )
            if not name:
                raise AddressBuildFailedError.with_identifier(
                    'object_id', ctx.object_id, f'Empty name for {level_name} level.'
                )

        spec = self.resolver.resolve(self.level, data.typename)
        address.set_part(self.level, AddressObject(
            fias_id=fias_id,
            kladr_id=ctx.param(ParamType.KLADR),
            name=name,
            type=spec.short_name,
            type_full=spec.name,
            name_position=spec.name_position,
            # учитываем переименования
            renaming=resolve_level_renaming(ctx.items, name),
        ))
        return fias_id


class HouseLevelHandler(LevelHandler):
    def __init__(self, house_resolver: AddressLevelSpecResolver, block_resolver: AddressLevelSpecResolver):
        self.house_resolver = house_resolver
        self.block_resolver = block_resolver

    def assign(self, address: Address, ctx: LevelContext) -> Optional[str]:
        data = ctx.data(HouseData)
        fias_id = prepare_string(data.objectguid)
        # Респ Башкортостан, г Кумертау, ул Брикетная, влд 5 к А стр 1/6
        spec = self.house_resolver.resolve(AddressLevel.HOUSE, type_code(data.housetype))

        address.house = House(
            fias_id=fias_id,
            kladr_id=ctx.param(ParamType.KLADR),
            number=prepare_string(data.housenum),
            type=spec.short_name,
            type_full=spec.name,
            block1=self._block(data.addnum1, data.addtype1),
            block2=self._block(data.addnum2, data.addtype2),
        )
        return fias_id

    def _block(self, number: Optional[str], add_type: Optional[int]) -> Optional[HouseBlock]:
        number = prepare_string(number)
        spec = self.block_resolver.resolve(AddressLevel.HOUSE, int(add_type)) if add_type else None
        if number is None and spec is None:
            return None
        return HouseBlock(
            number=number,
            type=spec.short_name if spec else None,
            type_full=spec.name if spec else None,
        )


class UnitLevelHandler(LevelHandler):
    """Квартиры и комнаты"""

    def __init__(self, level: AddressLevel, resolver: AddressLevelSpecResolver, data_model: type, type_field: str):
        self.level = level
        self.resolver = resolver
        self.data_model = data_model
        self.type_field = type_field

    def assign(self, address: Address, ctx: LevelContext) -> Optional[str]:
        data = ctx.data(self.data_model)
        fias_id = prepare_string(data.objectguid)
        spec = self.resolver.resolve(self.level, type_code(getattr(data, self.type_field)))

        address.set_part(self.level, Unit(
            fias_id=fias_id,
            number=prepare_string(data.number),
            type=spec.short_name,
            type_full=spec.name,
        ))
        return fias_id


def resolve_level_renaming(items: List[HierarchyNode], current_name: Optional[str]) -> List[str]:
    """Различные прежние названия уровня, кроме текущего"""
    names = (prepare_string(getattr(item.data, 'name', None)) for item in items if not item.is_live)
    return [name for name in dict.fromkeys(names) if name is not None and name != current_name]


class FiasAddressBuilder:
    """
    Формирует адрес на основе иерархии ГАР.

    Уровни группируются по уровню ГАР: дополнительные территории (СНТ, ГСК)
    попадают на один уровень адреса, поэтому в группе может быть несколько
    версий, но актуальной (active + actual) должна быть не больше одной.
    Последняя группа задает итоговые поля адреса.
    """

    def __init__(
        self,
        addr_obj_resolver: AddressLevelSpecResolver,
        house_resolver: AddressLevelSpecResolver,
        add_house_resolver: AddressLevelSpecResolver,
        apartment_resolver: AddressLevelSpecResolver,
        room_resolver: AddressLevelSpecResolver,
        comparator: ActualityComparator,
        synonymizer: AddressSynonymizer,
        today: Callable[[], date] = date.today,
    ):
        self._comparator = comparator
        self._synonymizer = synonymizer
        self._today = today
        # машино-места и земельные участки не индексируем, обработчиков для них нет
        self._handlers: Dict[AddressLevel, LevelHandler] = {
            AddressLevel.REGION: AddrObjLevelHandler(AddressLevel.REGION, addr_obj_resolver, required=True),
            AddressLevel.AREA: AddrObjLevelHandler(AddressLevel.AREA, addr_obj_resolver),
            AddressLevel.CITY: AddrObjLevelHandler(AddressLevel.CITY, addr_obj_resolver),
            AddressLevel.SETTLEMENT: AddrObjLevelHandler(AddressLevel.SETTLEMENT, addr_obj_resolver),
            AddressLevel.STREET: AddrObjLevelHandler(AddressLevel.STREET, addr_obj_resolver),
            AddressLevel.HOUSE: HouseLevelHandler(house_resolver, add_house_resolver),
            AddressLevel.FLAT: UnitLevelHandler(AddressLevel.FLAT, apartment_resolver, ApartmentData, 'aparttype'),
            AddressLevel.ROOM: UnitLevelHandler(AddressLevel.ROOM, room_resolver, RoomData, 'roomtype'),
        }

    def build(self, data: Union[Mapping[str, Any], HierarchyPayload], existing: Optional[Address] = None) -> Address:
        payload = self._parse(data)
        object_id = payload.object_id

        parents_by_levels = self._group_by_levels(payload.parents)
        if not parents_by_levels:
            raise AddressBuildFailedError.with_identifier('object_id', object_id, 'Empty hierarchy.')
        last_fias_level = list(parents_by_levels)[-1]

        # изменения, внесенные другими проходами, сохраняются
        address = existing if existing is not None else Address()

        logger.debug(f"Сборка адреса object_id={object_id}: уровней {len(parents_by_levels)}")

        for fias_level, level_items in parents_by_levels.items():
            address_level = map_fias_level(fias_level)
            handler = self._handlers.get(address_level)
            if handler is None:
                raise UnsupportedAddressLevelError(address_level.name.lower())

            actual_items = [item for item in level_items if item.is_live]
            if len(actual_items) > 1:
                raise AddressBuildFailedError.with_identifier(
                    'object_id',
                    object_id,
                    f'There are "{len(actual_items)}" actual relations for one fias level "{int(fias_level)}"',
                    count=len(actual_items),
                )

            fias_id = None
            ctx = None
            if actual_items:
                ctx = LevelContext(
                    object_id=object_id,
                    fias_level=fias_level,
                    address_level=address_level,
                    node=actual_items[0],
                    items=level_items,
                    params=self._resolve_actual_params(actual_items[0]),
                )
                fias_id = handler.assign(address, ctx)
            else:
                logger.debug(f"object_id={object_id}: нет актуальной записи для уровня ГАР {int(fias_level)}")

            # данные последнего уровня
            if fias_level == last_fias_level:
                if ctx is None or fias_id is None:
                    raise AddressBuildFailedError.with_identifier(
                        'object_id',
                        object_id,
                        f'Empty fiasId for {address_level.name.lower()} level.',
                    )
                self._finalize(address, ctx, fias_id, payload.hierarchy_id)

        return address

    def _finalize(self, address: Address, ctx: LevelContext, fias_id: str, hierarchy_id: int) -> None:
        address.fias_id = fias_id
        address.address_level = ctx.address_level
        address.fias_level = ctx.fias_level
        address.fias_hierarchy_id = hierarchy_id
        address.kladr_id = ctx.param(ParamType.KLADR)
        address.okato = ctx.param(ParamType.OKATO)
        address.oktmo = ctx.param(ParamType.OKTMO)
        address.postal_code = ctx.param(ParamType.POSTAL_CODE)
        address.synonyms = list(self._synonymizer.get_synonyms(fias_id))

    @staticmethod
    def _parse(data) -> HierarchyPayload:
        if isinstance(data, HierarchyPayload):
            return data
        try:
            return HierarchyPayload.model_validate(data)
        except ValidationError as e:
            raise MalformedInputError(f"Malformed hierarchy payload: {e}") from e

    @staticmethod
    def _group_by_levels(parents: List[HierarchyNode]) -> Dict[FiasLevel, List[HierarchyNode]]:
        res: Dict[FiasLevel, List[HierarchyNode]] = {}
        for item in parents:
            res.setdefault(item.fias_level, []).append(item)
        return res

    def _resolve_actual_params(self, node: HierarchyNode) -> Dict[int, TimedValue]:
        res: Dict[int, TimedValue] = {}
        current_date = self._today()

        for type_id, values in node.params_by_type().items():
            if type_id not in ACTUAL_PARAM_TYPES:
                continue
            for value in values:
                # сразу пропускаем неактуальные
                if value.end_date is not None and value.end_date < current_date:
                    continue

                old = res.get(type_id)
                # обновляем только если новое значение более актуальное
                if old is None or self._comparator.compare(
                    old.start_date, old.end_date, value.start_date, value.end_date
                ) == -1:
                    res[type_id] = value

        return res


def create_default_builder(
    synonymizer: Optional[AddressSynonymizer] = None,
    today: Callable[[], date] = date.today,
) -> FiasAddressBuilder:
    return FiasAddressBuilder(
        AddrObjTypeSpecResolver(),
        HouseTypeSpecResolver(),
        AddHouseTypeSpecResolver(),
        ApartmentTypeSpecResolver(),
        RoomTypeSpecResolver(),
        ActualityComparator(),
        synonymizer or NullSynonymizer(),
        today=today,
    )
