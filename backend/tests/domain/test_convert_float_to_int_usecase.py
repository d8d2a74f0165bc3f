"""Float to int conversion — truncation, int32 bounds and logging.

Tests cover:
    - Truncation toward zero for positive, negative and zero inputs
    - Values at the int32 bounds convert successfully
    - Values beyond either bound fail with a descriptive message
    - Failures are reported in the result, never raised
    - Log records emitted on success and failure
"""

import logging
import math

import pytest

from first_program.domain.entities.conversion_entity import INT32_MAX, INT32_MIN, ConversionResult
from first_program.domain.usecases.convert_float_to_int_usecase import ConvertFloatToIntUseCase


@pytest.fixture
def usecase():
    return ConvertFloatToIntUseCase()


# --- Successful conversions ---------------------------------------------------

def test_converts_positive_value(usecase):
    result = usecase.execute(42.7)
    assert result == ConversionResult.success(42.7, 42)
    assert result.error_message is None


def test_converts_negative_value_toward_zero(usecase):
    result = usecase.execute(-123.456)
    assert result.is_successful
    assert result.original_value == -123.456
    assert result.converted_value == -123


def test_converts_zero(usecase):
    assert usecase.execute(0.0) == ConversionResult.success(0.0, 0)


@pytest.mark.parametrize("value, expected", [
    (1.1, 1),
    (99.9, 99),
    (-1.9, -1),
    (0.5, 0),
    (-0.5, 0),
    (50.75, 50),
])
def test_truncates_instead_of_rounding(usecase, value, expected):
    result = usecase.execute(value)
    assert result.is_successful
    assert result.converted_value == expected
    assert result.converted_value == math.trunc(value)


def test_max_int_value_converts(usecase):
    result = usecase.execute(float(INT32_MAX))
    assert result.is_successful
    assert result.converted_value == INT32_MAX


def test_min_int_value_converts(usecase):
    result = usecase.execute(float(INT32_MIN))
    assert result.is_successful
    assert result.converted_value == INT32_MIN


def test_converted_value_is_int(usecase):
    assert type(usecase.execute(7.9).converted_value) is int


# --- Out of range -------------------------------------------------------------

@pytest.mark.parametrize("value", [INT32_MAX + 1.0, INT32_MAX + 1000.0, 1e20, math.inf])
def test_value_above_max_fails(usecase, value):
    result = usecase.execute(value)
    assert not result.is_successful
    assert result.original_value == value
    assert result.converted_value is None
    assert "exceeds maximum integer value" in result.error_message


@pytest.mark.parametrize("value", [INT32_MIN - 1.0, INT32_MIN - 1000.0, -1e20, -math.inf])
def test_value_below_min_fails(usecase, value):
    result = usecase.execute(value)
    assert not result.is_successful
    assert result.converted_value is None
    assert "below minimum integer value" in result.error_message


def test_nan_is_reported_as_failure(usecase, caplog):
    caplog.set_level(logging.DEBUG, logger="first_program")
    result = usecase.execute(math.nan)
    assert not result.is_successful
    assert result.error_message.startswith("Unexpected error during conversion")
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is not None
    assert errors[0].getMessage() == result.error_message


def test_non_numeric_input_is_reported_as_failure(usecase):
    result = usecase.execute("not a number")
    assert not result.is_successful
    assert result.converted_value is None
    assert result.error_message.startswith("Unexpected error during conversion")


# --- Result invariants --------------------------------------------------------

def test_result_is_immutable(usecase):
    result = usecase.execute(1.5)
    with pytest.raises(AttributeError):
        result.converted_value = 2


def test_success_and_failure_populate_exactly_one_payload():
    ok = ConversionResult.success(3.2, 3)
    bad = ConversionResult.failure(3e10, "too big")
    assert ok.converted_value is not None and ok.error_message is None
    assert bad.converted_value is None and bad.error_message is not None


@pytest.mark.parametrize("kwargs", [
    dict(is_successful=True),
    dict(is_successful=True, converted_value=1, error_message="both"),
    dict(is_successful=False),
    dict(is_successful=False, converted_value=1, error_message="both"),
])
def test_inconsistent_result_is_rejected(kwargs):
    with pytest.raises(ValueError):
        ConversionResult(original_value=1.0, **kwargs)


# --- Logging ------------------------------------------------------------------

def test_success_logs_debug_and_info(usecase, caplog):
    caplog.set_level(logging.DEBUG, logger="first_program")
    usecase.execute(42.7)
    levels = [r.levelno for r in caplog.records]
    assert logging.DEBUG in levels
    assert any(r.levelno == logging.INFO and "Successfully converted 42.7 to 42" in r.getMessage()
               for r in caplog.records)


@pytest.mark.parametrize("value, expected", [
    (1e12, "exceeds maximum integer value"),
    (-1e20, "below minimum integer value"),
])
def test_range_failure_logs_warning(usecase, caplog, value, expected):
    caplog.set_level(logging.DEBUG, logger="first_program")
    usecase.execute(value)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert expected in warnings[0].getMessage()
    assert not any(r.levelno == logging.ERROR for r in caplog.records)


def test_injected_logger_is_used(caplog):
    logger = logging.getLogger("tests.conversion")
    caplog.set_level(logging.INFO, logger="tests.conversion")
    ConvertFloatToIntUseCase(logger=logger).execute(2.5)
    assert [r.name for r in caplog.records] == ["tests.conversion"]
