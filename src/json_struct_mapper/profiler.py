"""Performance profiler for conversion operations."""

import json
import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, asdict
from contextlib import contextmanager


@dataclass
class ConversionMetrics:
    """Performance metrics for a single conversion operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    memory_peak_mb: float
    throughput_mbps: float


class ConversionProfiler:
    """
    Profiler recording wall time and memory of conversion operations.

    Memory figures are the resident set size of the current process,
    read through psutil.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the conversion profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[ConversionMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.peak_memory: float = 0
        self.input_size: int = 0
        self.output_size: int = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        Metrics are recorded only when the block completes without error.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        except BaseException:
            self._reset_state()
            raise
        self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0) -> None:
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
            input_size: Size of input data in bytes
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.output_size = 0
        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def sample_memory(self) -> None:
        """Sample current memory usage and update the peak."""
        if not self.current_operation:
            return

        self.peak_memory = max(self.peak_memory, self._current_memory_mb())

    def stop_profiling(self, output_size: Optional[int] = None) -> ConversionMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_size: Size of output data in bytes; defaults to the
                ``output_size`` attribute set while the operation ran

        Returns:
            ConversionMetrics for the finished operation

        Raises:
            ValueError: If no profiling session is active
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        if output_size is None:
            output_size = self.output_size

        end_time = time.perf_counter()
        duration = end_time - self.start_time
        end_memory = self._current_memory_mb()
        self.peak_memory = max(self.peak_memory, end_memory)

        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0

        metrics = ConversionMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            memory_peak_mb=self.peak_memory,
            throughput_mbps=throughput
        )
        self.metrics_history.append(metrics)

        self.logger.info(f"Performance Summary - {self.current_operation}: "
                         f"{duration:.4f}s, {throughput:.2f} MB/s, "
                         f"peak memory {self.peak_memory:.1f} MB")

        self._reset_state()
        return metrics

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded metrics.

        Returns:
            Dictionary with aggregated figures and per-operation entries
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        count = len(self.metrics_history)
        return {
            "total_operations": count,
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_output_bytes": sum(m.output_size for m in self.metrics_history),
            "max_memory_peak_mb": max(m.memory_peak_mb for m in self.metrics_history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in self.metrics_history) / count,
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "memory_peak": m.memory_peak_mb
                }
                for m in self.metrics_history
            ]
        }

    def export_metrics(self) -> str:
        """Export recorded metrics as a JSON array."""
        return json.dumps([asdict(m) for m in self.metrics_history], indent=2)

    def _current_memory_mb(self) -> float:
        return psutil.Process().memory_info().rss / 1024 / 1024

    def _reset_state(self) -> None:
        self.current_operation = None
        self.start_time = None
        self.start_memory = None
