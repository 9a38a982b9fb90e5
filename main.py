import sys

from loguru import logger

from backends import DianaBackend, MongoBackend, MySQLBackend
from benchmarker import BenchmarkRunner
from clients import BenchmarkConfig, diana_config, mongo_config, mysql_config


def main():
    logger.remove()
    logger.add(sys.stderr, level="INFO")

    benchmark = BenchmarkRunner(
        BenchmarkConfig(),
        [
            MongoBackend(mongo_config),
            DianaBackend(diana_config),
            MySQLBackend(mysql_config),
        ],
    )
    results = benchmark.run_all()
    benchmark.plot_results("benchmark")
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
