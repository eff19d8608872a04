"""
Ошибки построения адреса
"""
from typing import Any, Optional


class AddressRepositoryError(Exception):
    """Базовая ошибка адресного репозитория"""


class AddressLevelSpecNotFoundError(AddressRepositoryError):
    """Не найдено описание типа для уровня адреса"""

    def __init__(self, level: Any, identifier: Any, source: str):
        self.level = level
        self.identifier = identifier
        self.source = source
        super().__init__(
            f'Failed to resolve spec for level "{level}" and identifier "{identifier}" ("{source}").'
        )


class AddressBuildFailedError(AddressRepositoryError):
    """Нарушен контракт входных данных при построении адреса"""

    def __init__(
        self,
        reason: str,
        identifier_name: Optional[str] = None,
        identifier: Any = None,
        count: Optional[int] = None,
    ):
        self.reason = reason
        self.identifier_name = identifier_name
        self.identifier = identifier
        self.count = count
        if identifier_name is not None:
            message = f'Failed to build address with {identifier_name} "{identifier}": {reason}'
        else:
            message = f"Failed to build address: {reason}"
        super().__init__(message)

    @classmethod
    def with_identifier(cls, identifier_name: str, identifier: Any, reason: str, count: Optional[int] = None):
        return cls(reason, identifier_name=identifier_name, identifier=identifier, count=count)


class UnsupportedAddressLevelError(AddressRepositoryError):
    """Уровень не должен попадать в сборку (машино-места, земельные участки)"""

    def __init__(self, level: Any):
        self.level = level
        super().__init__(f'Unsupported address level "{level}".')


class MalformedInputError(AddressRepositoryError):
    """Входные данные не соответствуют ожидаемой структуре"""
