"""
Человекочитаемое представление адреса
"""
from typing import List, Optional

from .models import Address, AddressObject, House, NamePosition, Unit


def _join_type(short_name: Optional[str], value: Optional[str], position: NamePosition = NamePosition.BEFORE) -> str:
    if not short_name:
        return value or ""
    if position == NamePosition.AFTER:
        return f"{value} {short_name}"
    return f"{short_name} {value}"


def format_address_object(part: Optional[AddressObject]) -> Optional[str]:
    if part is None or not part.name:
        return None
    return _join_type(part.type, part.name, part.name_position)


def format_house(house: Optional[House]) -> Optional[str]:
    """д. 1, корп. 2, стр. 3"""
    if house is None:
        return None
    parts = []
    if house.number:
        parts.append(_join_type(house.type, house.number))
    for block in (house.block1, house.block2):
        if block is not None and block.number:
            parts.append(_join_type(block.type, block.number))
    return ", ".join(parts) if parts else None


def format_unit(unit: Optional[Unit]) -> Optional[str]:
    if unit is None or not unit.number:
        return None
    return _join_type(unit.type, unit.number)


def format_address(address: Address) -> str:
    """Московская обл., г. Москва, ул. Ленина, д. 1, корп. 2, кв. 5"""
    parts: List[Optional[str]] = [
        format_address_object(address.region),
        format_address_object(address.area),
        format_address_object(address.city),
        format_address_object(address.settlement),
        format_address_object(address.street),
        format_house(address.house),
        format_unit(address.flat),
        format_unit(address.room),
    ]
    return ", ".join(p for p in parts if p)
