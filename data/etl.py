"""
ETL скрипт: сборка адресов из иерархии ГАР (MySQL) и загрузка в Elasticsearch
"""
import argparse
import logging
import sys
import time
from typing import Any, Dict, Iterable, Iterator, List, Optional

import mysql.connector
from elasticsearch import Elasticsearch
from elasticsearch.helpers import bulk
from tqdm import tqdm

from config import settings, get_elasticsearch_config, get_mysql_config
from fias import AddressRepositoryError, FiasAddressBuilder, create_default_builder, format_address

from .synonyms import create_synonymizer

logger = logging.getLogger(__name__)

INDEX_MAPPING = {
    "mappings": {
        "dynamic_templates": [
            {
                "ids_as_keywords": {
                    "match_pattern": "regex",
                    "match": "^(fias_id|kladr_id|okato|oktmo|postal_code|type|type_full|name_position)$",
                    "mapping": {"type": "keyword"}
                }
            }
        ],
        "properties": {
            "full_address": {
                "type": "text",
                "analyzer": "standard",
                "fields": {
                    "keyword": {
                        "type": "keyword",
                        "ignore_above": 1024
                    }
                }
            },
            "address_level": {"type": "integer"},
            "fias_level": {"type": "integer"},
            "fias_hierarchy_id": {"type": "long"},
            "synonyms": {"type": "text", "analyzer": "standard"},
            "renaming": {"type": "text", "analyzer": "standard"}
        }
    },
    "settings": {
        "number_of_shards": 1,
        "number_of_replicas": 0,
        "refresh_interval": "30s"
    }
}


class FiasETL:
    """ETL процесс: иерархия ГАР -> адрес -> индекс"""

    def __init__(
        self,
        region_codes: Optional[List[int]] = None,
        recreate_index: bool = True,
        builder: Optional[FiasAddressBuilder] = None,
        es: Optional[Elasticsearch] = None,
    ):
        self.es = es if es is not None else Elasticsearch(**get_elasticsearch_config())
        self.mysql_config = get_mysql_config()
        self.region_codes = region_codes
        self.recreate_index = recreate_index
        self.builder = builder if builder is not None else create_default_builder(create_synonymizer())
        self.built_count = 0
        self.failed_count = 0

    def create_index(self) -> bool:
        """Создание индекса в Elasticsearch"""
        try:
            # Удаляем индекс если существует и требуется пересоздать
            if self.recreate_index and self.es.indices.exists(index=settings.ES_INDEX):
                logger.info(f"Удаляем существующий индекс {settings.ES_INDEX}")
                self.es.indices.delete(index=settings.ES_INDEX)

            if not self.es.indices.exists(index=settings.ES_INDEX):
                self.es.indices.create(
                    index=settings.ES_INDEX,
                    mappings=INDEX_MAPPING["mappings"],
                    settings=INDEX_MAPPING["settings"],
                )
                logger.info(f"Индекс {settings.ES_INDEX} создан успешно")
            return True

        except Exception as e:
            logger.error(f"Ошибка создания индекса: {e}")
            return False

    def iter_payload_rows(self) -> Iterator[Dict[str, Any]]:
        """Получение иерархий из MySQL пакетами"""
        connection = mysql.connector.connect(**self.mysql_config)
        try:
            cursor = connection.cursor(dictionary=True)

            query = f"SELECT hierarchy_id, object_id, parents FROM {settings.MYSQL_HIERARCHY_TABLE}"
            params: List[Any] = []
            if self.region_codes:
                placeholders = ", ".join(["%s"] * len(self.region_codes))
                query += f" WHERE region_code IN ({placeholders})"
                params.extend(self.region_codes)
            query += " ORDER BY hierarchy_id"

            logger.info("Выполняем запрос к MySQL...")
            cursor.execute(query, tuple(params))

            while True:
                batch = cursor.fetchmany(settings.ETL_BATCH_SIZE)
                if not batch:
                    break
                yield from batch

            cursor.close()
        finally:
            connection.close()

    def iter_documents(self, rows: Iterable[Dict[str, Any]]) -> Iterator[Dict[str, Any]]:
        """Сборка адресов и преобразование в документы Elasticsearch"""
        for row in rows:
            try:
                address = self.builder.build(row)
            except AddressRepositoryError as e:
                # битые записи пропускаем, остальные продолжаем грузить
                self.failed_count += 1
                logger.warning(f"Не удалось собрать адрес object_id={row.get('object_id')}: {e}")
                continue

            self.built_count += 1
            source = address.model_dump(mode="json")
            source["full_address"] = format_address(address)
            yield {
                '_index': settings.ES_INDEX,
                '_id': address.fias_id,
                '_source': source,
            }

    def load_data(self) -> bool:
        """Загрузка данных в Elasticsearch"""
        try:
            logger.info("Начинаем загрузку данных...")

            docs = self.iter_documents(self.iter_payload_rows())
            success_count, errors = bulk(
                self.es,
                tqdm(docs, desc="Адреса", unit="док"),
                chunk_size=settings.ETL_CHUNK_SIZE,
                request_timeout=60,
                max_retries=3,
                initial_backoff=2,
                max_backoff=600,
                raise_on_error=False,
            )

            logger.info(f"Загружено документов: {success_count}")
            if self.failed_count:
                logger.warning(f"Адресов с ошибкой сборки: {self.failed_count}")
            if errors:
                logger.warning(f"Ошибок при загрузке: {len(errors)}")

            self.es.indices.refresh(index=settings.ES_INDEX)
            return True

        except Exception as e:
            logger.error(f"Ошибка загрузки данных: {e}")
            return False

    def run_etl(self) -> bool:
        """Запуск полного ETL процесса"""
        logger.info("Запуск ETL процесса FIAS")

        start_time = time.time()

        if not self.es.ping():
            logger.error("Не удалось подключиться к Elasticsearch")
            return False

        if not self.create_index():
            return False

        if not self.load_data():
            return False

        elapsed_time = time.time() - start_time
        logger.info(f"ETL завершен за {elapsed_time:.2f} секунд")
        logger.info(f"Собрано адресов: {self.built_count}, с ошибкой: {self.failed_count}")

        return True


def main():
    parser = argparse.ArgumentParser(description='Сборка адресов ГАР и загрузка в Elasticsearch')
    parser.add_argument('--region', type=int, action='append', dest='regions', help='Код региона (можно несколько)')
    parser.add_argument('--keep-index', action='store_true', help='Не пересоздавать индекс')
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))

    etl = FiasETL(region_codes=args.regions, recreate_index=not args.keep_index)
    if etl.run_etl():
        print("✅ ETL процесс завершен успешно")
    else:
        print("❌ ETL процесс завершился с ошибкой")
        sys.exit(1)


if __name__ == "__main__":
    main()
