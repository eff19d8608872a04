from .settings import settings, Settings, get_elasticsearch_config, get_mysql_config

__all__ = ["settings", "Settings", "get_elasticsearch_config", "get_mysql_config"]
