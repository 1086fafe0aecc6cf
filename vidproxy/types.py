from typing import Any


# Type aliases for Python dictionaries
AppConfig = dict[str, Any]
RedisConfig = dict[str, Any]
UpstreamConfig = dict[str, Any]
ResponseHeaders = dict[str, str]
