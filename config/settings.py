"""
Конфигурация сборщика адресов FIAS
"""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # Elasticsearch
    ES_URL: str = "http://localhost:9200"
    ES_API_KEY: Optional[str] = None
    ES_USER: Optional[str] = None
    ES_PASS: Optional[str] = None
    ES_INDEX: str = "fias_addresses"
    ES_TIMEOUT: int = 60

    # MySQL FIAS (ГАР)
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_USER: str = "fias"
    MYSQL_PASSWORD: str = ""
    MYSQL_DATABASE: str = "fias"
    MYSQL_HIERARCHY_TABLE: str = "address_hierarchy"
    MYSQL_SYNONYMS_TABLE: Optional[str] = None

    # Синонимы из JSON файла (fias_id -> [названия])
    SYNONYMS_FILE: Optional[str] = None

    # ETL
    ETL_BATCH_SIZE: int = 1000
    ETL_CHUNK_SIZE: int = 500

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = False

    # Логирование
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Глобальный экземпляр настроек
settings = Settings()


def get_elasticsearch_config():
    """Конфигурация для подключения к Elasticsearch"""
    config = {
        "hosts": [settings.ES_URL],
        "request_timeout": settings.ES_TIMEOUT
    }

    # API Key аутентификация (приоритет)
    if settings.ES_API_KEY:
        config["api_key"] = settings.ES_API_KEY
    # Basic Auth (альтернатива)
    elif settings.ES_USER and settings.ES_PASS:
        config["basic_auth"] = (settings.ES_USER, settings.ES_PASS)

    return config


def get_mysql_config() -> dict:
    """Параметры подключения к MySQL"""
    return {
        'host': settings.MYSQL_HOST,
        'port': settings.MYSQL_PORT,
        'user': settings.MYSQL_USER,
        'password': settings.MYSQL_PASSWORD,
        'database': settings.MYSQL_DATABASE,
        'charset': 'utf8mb4'
    }
