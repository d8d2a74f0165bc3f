from dataclasses import dataclass
from typing import Optional


INT32_MAX = 2147483647
INT32_MIN = -2147483648


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a float to 32-bit integer conversion.

    Exactly one of converted_value / error_message is set, depending on
    is_successful. Build it with success() or failure().
    """
    original_value: float
    is_successful: bool
    converted_value: Optional[int] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        if self.is_successful and (self.converted_value is None or self.error_message is not None):
            raise ValueError("A successful result needs a converted_value and no error_message")
        if not self.is_successful and (self.error_message is None or self.converted_value is not None):
            raise ValueError("A failed result needs an error_message and no converted_value")

    @classmethod
    def success(cls, original_value: float, converted_value: int) -> "ConversionResult":
        return cls(original_value=original_value, is_successful=True, converted_value=converted_value)

    @classmethod
    def failure(cls, original_value: float, error_message: str) -> "ConversionResult":
        return cls(original_value=original_value, is_successful=False, error_message=error_message)
