"""
Загрузка синонимов адресов из MySQL
"""
import logging
from typing import Dict, List, Optional

import mysql.connector

from config import settings, get_mysql_config
from fias.synonyms import AddressSynonymizer, DictSynonymizer, NullSynonymizer, load_synonyms_file

logger = logging.getLogger(__name__)


def load_mysql_synonyms(table: str, mysql_config: Optional[dict] = None) -> DictSynonymizer:
    """Загрузка всех синонимов из таблицы (fias_id, name) в память"""
    connection = mysql.connector.connect(**(mysql_config or get_mysql_config()))
    try:
        cursor = connection.cursor(dictionary=True)
        cursor.execute(f"SELECT fias_id, name FROM {table} WHERE name IS NOT NULL AND name != ''")

        synonyms: Dict[str, List[str]] = {}
        while True:
            batch = cursor.fetchmany(settings.ETL_BATCH_SIZE)
            if not batch:
                break
            for row in batch:
                synonyms.setdefault(str(row['fias_id']), []).append(row['name'].strip())

        cursor.close()
    finally:
        connection.close()

    logger.info(f"Загружено синонимов для {len(synonyms)} адресов из таблицы {table}")
    return DictSynonymizer(synonyms)


def create_synonymizer() -> AddressSynonymizer:
    """Источник синонимов по настройкам: JSON файл, таблица MySQL или пустой"""
    if settings.SYNONYMS_FILE:
        return load_synonyms_file(settings.SYNONYMS_FILE)
    if settings.MYSQL_SYNONYMS_TABLE:
        return load_mysql_synonyms(settings.MYSQL_SYNONYMS_TABLE)
    return NullSynonymizer()
