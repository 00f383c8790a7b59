"""
Base engine class for bookkeeping engines.

Provides common functionality:
- Configuration loading
- Structured logging
- Calculation audit history and export
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

import structlog
from pydantic import BaseModel

from balancebooks.core.config import ConfigManager, get_config


class CalculationRecord(BaseModel):
    """
    Audit entry for a single engine calculation.

    Kept so a statement's numbers can be traced back to the inputs that
    produced them.
    """

    timestamp: datetime
    engine_name: str
    calculation_type: str
    input_data: dict[str, Any]
    output_data: dict[str, Any]
    execution_time_seconds: float


class BaseEngine(ABC):
    """
    Base class for bookkeeping engines.

    Provides:
    - Configuration loading
    - Calculation logging
    - Audit history export
    """

    def __init__(
        self,
        engine_name: str,
        config_manager: Optional[ConfigManager] = None,
        logger: Optional[structlog.BoundLogger] = None,
    ) -> None:
        """
        Initialize the base engine.

        Args:
            engine_name: Name of the engine (e.g., "settlement")
            config_manager: Optional config manager (defaults to global instance)
            logger: Optional structured logger
        """
        self.engine_name = engine_name
        self.config_manager = config_manager or get_config()
        self.logger = logger or structlog.get_logger(engine_name=engine_name)

        self.calculation_history: list[CalculationRecord] = []

        self.logger.debug("engine_initialized", engine_name=engine_name)

    def log_calculation(self, record: CalculationRecord) -> None:
        """
        Record a calculation in the audit history.

        Args:
            record: CalculationRecord with calculation details
        """
        self.calculation_history.append(record)
        self.logger.info(
            "calculation_recorded",
            calculation_type=record.calculation_type,
            execution_time=record.execution_time_seconds,
        )

    def export_calculations(self, filepath: str) -> None:
        """
        Export calculation history to JSON file.

        Args:
            filepath: Path to output JSON file
        """
        with open(filepath, "w") as f:
            records = [r.model_dump(mode="json") for r in self.calculation_history]
            json.dump(records, f, indent=2, default=str)

        self.logger.info(
            "calculations_exported", filepath=filepath, count=len(self.calculation_history)
        )

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """
        Execute the engine's primary calculation.

        Returns:
            Engine-specific output
        """
        pass

    def __repr__(self) -> str:
        """String representation of the engine."""
        return f"{self.__class__.__name__}(engine_name='{self.engine_name}')"
