from dataclasses import dataclass


@dataclass(frozen=True)
class BenchmarkConfig:
    num_users: int = 10000
    skip: int = 100
    limit: int = 10
    query_name: str = "Diana"


# Setup configs
mongo_config = {
    "uri": "mongodb://localhost:27017/",
    "db": "benchmark",
    "collection": "users",
    "server_selection_timeout_ms": 5000,
}

mysql_config = {
    "host": "127.0.0.1",
    "port": 3306,
    "user": "benchmark",
    "password": "benchmark",  # Change this
    "database": "benchmark"
}

diana_config = {
    "driver": "diana_db",
    "user": "admin",
    "password": "admin",
    "host": "127.0.0.1",
    "port": 34567,
    "connection_pool_size": 5,
    "connect_timeout": 5000,
    "database": "user",
    "collection": "user",
    "model_name": "User",
}
