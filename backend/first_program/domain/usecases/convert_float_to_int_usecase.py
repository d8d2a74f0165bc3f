import logging
import math
from typing import Optional

from first_program.core.utils.logger import get_logger
from first_program.domain.entities.conversion_entity import INT32_MAX, INT32_MIN, ConversionResult


class ConvertFloatToIntUseCase:
    """Use case that converts a float to a 32-bit integer by truncation.

    Out-of-range values are reported through a failed ConversionResult;
    nothing is raised to the caller.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("conversion")

    def execute(self, value: float) -> ConversionResult:
        try:
            self._logger.debug("Converting float value %s to integer", value)

            if value > INT32_MAX:
                error_msg = f"Value {value} exceeds maximum integer value ({INT32_MAX})"
                self._logger.warning(error_msg)
                return ConversionResult.failure(value, error_msg)

            if value < INT32_MIN:
                error_msg = f"Value {value} is below minimum integer value ({INT32_MIN})"
                self._logger.warning(error_msg)
                return ConversionResult.failure(value, error_msg)

            converted = math.trunc(value)
            self._logger.info("Successfully converted %s to %s", value, converted)
            return ConversionResult.success(value, converted)
        except (TypeError, ValueError, OverflowError) as e:
            # NaN and non-numeric input
            error_msg = f"Unexpected error during conversion: {e}"
            self._logger.exception(error_msg)
            return ConversionResult.failure(value, error_msg)
