"""
Таблицы типов уровней адреса ГАР.

Каждый резолвер возвращает AddressLevelSpec по коду или названию типа и падает
с AddressLevelSpecNotFoundError на неизвестном значении. Часто встречающиеся
"неопределенные" коды явно сведены к ближайшему типу в самих таблицах.
"""
from typing import Dict, Optional, Tuple

from .exceptions import AddressLevelSpecNotFoundError
from .levels import AddressLevel
from .models import AddressLevelSpec, NamePosition
from .normalizer import canonical_type_name

# полное название, сокращение, положение (None - по уровню)
TypeEntry = Tuple[str, str, Optional[NamePosition]]

ADDR_OBJ_TYPES: Dict[str, TypeEntry] = {
    # субъекты
    "обл": ("область", "обл.", None),
    "край": ("край", "край", None),
    "респ": ("республика", "респ.", NamePosition.BEFORE),
    "ао": ("автономный округ", "АО", None),
    "аобл": ("автономная область", "Аобл.", None),
    "г.ф.з": ("город федерального значения", "г.ф.з.", NamePosition.BEFORE),
    # районы и муниципальные образования
    "р-н": ("район", "р-н", None),
    "м.р-н": ("муниципальный район", "м.р-н", None),
    "г.о": ("городской округ", "г.о.", NamePosition.BEFORE),
    "м.о": ("муниципальный округ", "м.о.", None),
    "вн.тер.г": ("внутригородская территория", "вн.тер.г.", None),
    "г.п": ("городское поселение", "г.п.", None),
    "с.п": ("сельское поселение", "с.п.", None),
    "с/с": ("сельсовет", "с/с", None),
    "с/о": ("сельский округ", "с/о", None),
    "с/а": ("сельская администрация", "с/а", None),
    "волость": ("волость", "волость", None),
    "у": ("улус", "у.", None),
    "тер": ("территория", "тер.", None),
    # населенные пункты
    "г": ("город", "г.", NamePosition.BEFORE),
    "пгт": ("поселок городского типа", "пгт.", None),
    "рп": ("рабочий поселок", "рп.", None),
    "кп": ("курортный поселок", "кп.", None),
    "дп": ("дачный поселок", "дп.", None),
    "п": ("поселок", "п.", None),
    "с": ("село", "с.", None),
    "д": ("деревня", "д.", None),
    "х": ("хутор", "х.", None),
    "ст-ца": ("станица", "ст-ца", None),
    "сл": ("слобода", "сл.", None),
    "м": ("местечко", "м.", None),
    "рзд": ("разъезд", "рзд.", None),
    "ст": ("станция", "ст.", None),
    "аул": ("аул", "аул", None),
    "нп": ("населенный пункт", "нп.", None),
    "п. ст": ("поселок при станции", "п. ст.", None),
    "ж/д ст": ("железнодорожная станция", "ж/д ст.", None),
    # планировочная структура и доп. территории
    "мкр": ("микрорайон", "мкр.", None),
    "кв-л": ("квартал", "кв-л", None),
    "снт": ("садовое некоммерческое товарищество", "СНТ", None),
    "днт": ("дачное некоммерческое товарищество", "ДНТ", None),
    "гск": ("гаражно-строительный кооператив", "ГСК", None),
    "промзона": ("промышленная зона", "промзона", None),
    "уч-к": ("участок", "уч-к", None),
    # улично-дорожная сеть
    "ул": ("улица", "ул.", None),
    "пер": ("переулок", "пер.", None),
    "пр-кт": ("проспект", "пр-кт", None),
    "б-р": ("бульвар", "б-р", None),
    "пр-д": ("проезд", "пр-д", None),
    "пл": ("площадь", "пл.", None),
    "ш": ("шоссе", "ш.", None),
    "наб": ("набережная", "наб.", None),
    "туп": ("тупик", "туп.", None),
    "аллея": ("аллея", "ал.", None),
    "линия": ("линия", "лн.", None),
    "тракт": ("тракт", "тракт", None),
    "проулок": ("проулок", "проул.", None),
    "дор": ("дорога", "дор.", None),
    "км": ("километр", "км", None),
    "сквер": ("сквер", "сквер", None),
    "въезд": ("въезд", "въезд", None),
    "спуск": ("спуск", "спуск", None),
    "кольцо": ("кольцо", "кольцо", None),
    "мгстр": ("магистраль", "мгстр.", None),
}

# as_house_types
HOUSE_TYPES: Dict[int, Tuple[str, str]] = {
    1: ("владение", "влд."),
    2: ("дом", "д."),
    3: ("домовладение", "двлд."),
    4: ("гараж", "г-ж"),
    5: ("здание", "зд."),
    6: ("шахта", "шахта"),
    7: ("строение", "стр."),
    8: ("сооружение", "соор."),
    9: ("литера", "лит."),
    10: ("корпус", "корп."),
    11: ("подвал", "подв."),
    12: ("котельная", "кот."),
    13: ("погреб", "п-б"),
    14: ("объект незавершенного строительства", "ОНС"),
}

# as_addhouse_types, коды не совпадают с типами домов
ADD_HOUSE_TYPES: Dict[int, Tuple[str, str]] = {
    1: ("корпус", "корп."),
    2: ("строение", "стр."),
    3: ("сооружение", "соор."),
    4: ("литера", "лит."),
}

# as_apartment_types
APARTMENT_TYPES: Dict[int, Tuple[str, str]] = {
    0: ("квартира", "кв."),  # "Не определено"
    1: ("помещение", "пом."),
    2: ("квартира", "кв."),
    3: ("офис", "оф."),
    4: ("комната", "комн."),
    5: ("рабочий участок", "раб.уч."),
    6: ("склад", "скл."),
    7: ("торговый зал", "торг.зал"),
    8: ("цех", "цех"),
    9: ("павильон", "пав."),
    10: ("подвал", "подв."),
    11: ("котельная", "кот."),
    12: ("погреб", "погр."),
    13: ("гараж", "гар."),
}

# as_room_types
ROOM_TYPES: Dict[int, Tuple[str, str]] = {
    0: ("помещение", "пом."),  # было "Не определено"
    1: ("комната", "комн."),
    2: ("помещение", "пом."),
}

LEVEL_NAME_POSITIONS = {
    AddressLevel.REGION: NamePosition.AFTER,
    AddressLevel.AREA: NamePosition.AFTER,
    AddressLevel.CITY: NamePosition.BEFORE,
    AddressLevel.SETTLEMENT: NamePosition.BEFORE,
    AddressLevel.STREET: NamePosition.BEFORE,
}


class AddressLevelSpecResolver:
    """Резолвер типа уровня адреса"""

    source = ""

    def resolve(self, level: AddressLevel, identifier) -> AddressLevelSpec:
        raise NotImplementedError


class AddrObjTypeSpecResolver(AddressLevelSpecResolver):
    """Типы адресных объектов (регион - улица) по названию типа"""

    source = "addr_obj_types"

    def __init__(self, types: Optional[Dict[str, TypeEntry]] = None):
        self._types = ADDR_OBJ_TYPES if types is None else types

    def resolve(self, level: AddressLevel, identifier) -> AddressLevelSpec:
        default_position = LEVEL_NAME_POSITIONS.get(level)
        entry = self._types.get(canonical_type_name(identifier or ""))
        if default_position is None or entry is None:
            raise AddressLevelSpecNotFoundError(level, identifier, self.source)

        name, short_name, position = entry
        return AddressLevelSpec(
            level=level,
            name=name,
            short_name=short_name,
            name_position=position or default_position,
        )


class TypeAddressLevelSpecResolver(AddressLevelSpecResolver):
    """Типы по целочисленному коду для одного уровня адреса"""

    def __init__(self, level: AddressLevel, types: Dict[int, Tuple[str, str]], source: str):
        self.level = level
        self.source = source
        self._specs = {
            code: AddressLevelSpec(level=level, name=name, short_name=short_name)
            for code, (name, short_name) in types.items()
        }

    def resolve(self, level: AddressLevel, identifier) -> AddressLevelSpec:
        spec = None
        if level == self.level:
            spec = self._specs.get(identifier)
        if spec is None:
            raise AddressLevelSpecNotFoundError(level, identifier, self.source)
        return spec


class HouseTypeSpecResolver(TypeAddressLevelSpecResolver):
    def __init__(self):
        super().__init__(AddressLevel.HOUSE, HOUSE_TYPES, "house_types")


class AddHouseTypeSpecResolver(TypeAddressLevelSpecResolver):
    def __init__(self):
        super().__init__(AddressLevel.HOUSE, ADD_HOUSE_TYPES, "addhouse_types")


class ApartmentTypeSpecResolver(TypeAddressLevelSpecResolver):
    def __init__(self):
        super().__init__(AddressLevel.FLAT, APARTMENT_TYPES, "apartment_types")


class RoomTypeSpecResolver(TypeAddressLevelSpecResolver):
    def __init__(self):
        super().__init__(AddressLevel.ROOM, ROOM_TYPES, "room_types")
