"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

STRATEGIES = ("balanced", "remainder")


@dataclass(slots=True)
class AppConfig:
    worker_count: int = 10
    shutdown_timeout: float = 5.0
    log_file_prefix: str = "logfile_"
    log_file_suffix: str = ".txt"
    strategy: str = "balanced"

    def __post_init__(self) -> None:
        if self.worker_count < 1:
            raise ValueError(f"worker_count must be at least 1, got {self.worker_count}")
        if self.shutdown_timeout < 0:
            raise ValueError(f"shutdown_timeout must not be negative, got {self.shutdown_timeout}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown partition strategy: {self.strategy}")

    def log_file_name(self, index: int) -> str:
        """Name of the log file owned by the worker with the given 1-based index."""
        return f"{self.log_file_prefix}{index}{self.log_file_suffix}"
