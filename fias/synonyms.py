"""
Синонимы адресов по fias_id
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)


class AddressSynonymizer:
    """Источник синонимов. После создания только читается."""

    def get_synonyms(self, fias_id: str) -> List[str]:
        raise NotImplementedError


class NullSynonymizer(AddressSynonymizer):
    def get_synonyms(self, fias_id: str) -> List[str]:
        return []


class DictSynonymizer(AddressSynonymizer):
    """Синонимы из словаря fias_id -> [названия]"""

    def __init__(self, synonyms: Optional[Mapping[str, Iterable[str]]] = None):
        self._synonyms: Dict[str, List[str]] = {}
        for fias_id, names in (synonyms or {}).items():
            self._synonyms[str(fias_id).lower()] = list(dict.fromkeys(n for n in names if n))

    def get_synonyms(self, fias_id: str) -> List[str]:
        if not fias_id:
            return []
        return list(self._synonyms.get(str(fias_id).lower(), []))

    def __len__(self) -> int:
        return len(self._synonyms)


def load_synonyms_file(path) -> DictSynonymizer:
    """Загрузка синонимов из JSON файла"""
    p = Path(path)
    with open(p, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Файл синонимов {p} должен содержать JSON объект")
    synonymizer = DictSynonymizer(data)
    logger.info(f"Загружено синонимов для {len(synonymizer)} адресов из {p}")
    return synonymizer
