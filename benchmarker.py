from dataclasses import dataclass
from enum import Enum
from typing import Optional

import matplotlib.pyplot as plt
from loguru import logger

from generator import generate_users
from utils import timer


class RunState(Enum):
    CONNECTING = "connecting"
    RUNNING = "running"
    CLOSED = "closed"


@dataclass
class RunResult:
    backend: str
    state: RunState = RunState.CONNECTING
    insert_time: Optional[float] = None
    query_time: Optional[float] = None
    rows_returned: int = 0
    inserted: int = 0
    failed_inserts: int = 0
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


class BenchmarkRunner:
    def __init__(self, config, backends):
        self.config = config
        self.backends = list(backends)
        self.results = []

    def _insert_all(self, backend, handle, users, result):
        for user in users:
            try:
                backend.insert(handle, user)
            except Exception as e:
                if not backend.tolerate_insert_errors:
                    raise
                result.failed_inserts += 1
                logger.warning(f"{backend.label} insert failed: {e}")
                continue
            result.inserted += 1

    def run_backend(self, backend, result=None):
        result = result or RunResult(backend.label)
        result.state = RunState.CONNECTING
        try:
            with backend.session() as handle:
                result.state = RunState.RUNNING
                users = generate_users(self.config.num_users, backend.record_factory)

                with timer() as t:
                    self._insert_all(backend, handle, users, result)
                result.insert_time = t.elapsed
                print(f"{backend.label} Insert: {t.ms:.3f}ms")

                with timer() as t:
                    rows = backend.query(handle, self.config)
                result.query_time = t.elapsed
                result.rows_returned = len(rows)
                print(f"{backend.label} Query: {t.ms:.3f}ms")
        finally:
            result.state = RunState.CLOSED

        if result.failed_inserts:
            logger.warning(f"{backend.label}: {result.failed_inserts} of {result.inserted + result.failed_inserts} inserts failed")
        return result

    def run_all(self):
        self.results = []
        print(f"Starting DB benchmarking with {self.config.num_users} docs/rows")

        for backend in self.backends:
            print(f"\n--- {backend.label} Benchmark ---")
            result = RunResult(backend.label)
            try:
                self.run_backend(backend, result)
            except Exception as e:
                result.error = f"{type(e).__name__}: {e}"
                logger.exception(f"{backend.label} benchmark failed")
            self.results.append(result)

        return self.results

    def plot_results(self, name: str):
        results = [r for r in self.results if r.ok]
        names = [r.backend for r in results]
        insert_times = [r.insert_time for r in results]
        query_times = [r.query_time for r in results]

        x = range(len(names))
        width = 0.35

        fig, ax = plt.subplots(figsize=(10, 6))
        insert_bars = ax.bar([i - width / 2 for i in x], insert_times, width, label="Insert")
        query_bars = ax.bar([i + width / 2 for i in x], query_times, width, label="Query")

        ax.set_ylabel('Execution Time (seconds)')
        ax.set_title(f'Insert {self.config.num_users} / Query Performance')
        ax.set_xticks(list(x))
        ax.set_xticklabels(names)
        ax.set_yscale('log')
        ax.legend()

        # Add time labels on top of each bar
        def add_labels(bars, times):
            for bar, time in zip(bars, times):
                height = bar.get_height()
                ax.annotate(f'{time:.4f}s',
                            xy=(bar.get_x() + bar.get_width() / 2, height),
                            xytext=(0, 3),  # offset
                            textcoords="offset points",
                            ha='center', va='bottom', fontsize=8)

        add_labels(insert_bars, insert_times)
        add_labels(query_bars, query_times)

        plt.tight_layout()
        path = f"{name}.png"
        plt.savefig(path, dpi=300, bbox_inches='tight')
        plt.close(fig)
        logger.info(f"Saved plot to {path}")
        return path
