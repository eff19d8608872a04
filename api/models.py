"""
Модели данных для API
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field

from fias.models import Address


class BuildRequest(BaseModel):
    """Иерархия ГАР для сборки одного адреса"""
    hierarchy_id: int
    object_id: int
    # список родителей или его JSON строка, как хранится в MySQL
    parents: Union[List[Dict[str, Any]], str]
    existing: Optional[Address] = Field(None, description="Ранее собранный адрес для дополнения")


class BuildResponse(BaseModel):
    """Собранный адрес"""
    address: Address
    full_address: str


class AddressDocument(BaseModel):
    """Адрес из индекса"""
    id: str
    full_address: Optional[str] = None
    address: Dict[str, Any]


class ErrorResponse(BaseModel):
    detail: str
    error: str
