from .builder import FiasAddressBuilder, create_default_builder
from .comparator import ActualityComparator
from .exceptions import (
    AddressBuildFailedError,
    AddressLevelSpecNotFoundError,
    AddressRepositoryError,
    MalformedInputError,
    UnsupportedAddressLevelError,
)
from .formatter import format_address
from .levels import AddressLevel, FiasLevel, RelationType
from .models import Address, AddressLevelSpec, HierarchyPayload, NamePosition
from .synonyms import AddressSynonymizer, DictSynonymizer, NullSynonymizer, load_synonyms_file

__all__ = [
    "FiasAddressBuilder",
    "create_default_builder",
    "ActualityComparator",
    "AddressBuildFailedError",
    "AddressLevelSpecNotFoundError",
    "AddressRepositoryError",
    "MalformedInputError",
    "UnsupportedAddressLevelError",
    "format_address",
    "AddressLevel",
    "FiasLevel",
    "RelationType",
    "Address",
    "AddressLevelSpec",
    "HierarchyPayload",
    "NamePosition",
    "AddressSynonymizer",
    "DictSynonymizer",
    "NullSynonymizer",
    "load_synonyms_file",
]
