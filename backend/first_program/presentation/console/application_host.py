"""Console host that runs the conversion and oracle demonstrations in sequence."""

from typing import Callable, Optional

from first_program.core.config.environment_config import EnvironmentConfig
from first_program.core.di.service_locator import ServiceLocator
from first_program.core.utils.logger import get_logger
from first_program.domain.usecases.ask_oracle_usecase import AskOracleUseCase
from first_program.domain.usecases.convert_float_to_int_usecase import ConvertFloatToIntUseCase


DEFAULT_CONVERSION_VALUE = 50.75
DEFAULT_QUESTION = "Will this application be successful?"
SEPARATOR = "-" * 50

logger = get_logger("host")


class ApplicationHost:
    """Runs each demonstration whose feature flag is enabled.

    Output goes through `write` (print by default) so tests can capture it.
    """

    def __init__(
        self,
        config: EnvironmentConfig,
        convert_usecase: ConvertFloatToIntUseCase,
        oracle_usecase: AskOracleUseCase,
        write: Callable[[str], None] = print,
    ) -> None:
        self._config = config
        self._convert = convert_usecase
        self._oracle = oracle_usecase
        self._write = write

    def run(self, value: float = DEFAULT_CONVERSION_VALUE, question: str = DEFAULT_QUESTION) -> None:
        logger.info("Starting %s application...", self._config.app_name)

        self._write(f"Welcome to {self._config.app_name} v{self._config.app_version}!")
        self._write("This demonstrates enterprise Python programming practices.")
        self._write(SEPARATOR)

        if self._config.enable_type_conversion:
            self.demonstrate_type_conversion(value)
        if self._config.enable_oracle_service:
            self.demonstrate_oracle(question)

        self._write(SEPARATOR)

    def demonstrate_type_conversion(self, value: float) -> None:
        self._write("\n=== Type Conversion Demonstration ===")
        result = self._convert.execute(value)
        if result.is_successful:
            self._write(f"Successfully converted {result.original_value} to {result.converted_value}")
        else:
            self._write(f"Conversion failed: {result.error_message}")

    def demonstrate_oracle(self, question: str) -> None:
        self._write("\n=== Magic 8-Ball Oracle Demonstration ===")
        response = self._oracle.execute(question)
        self._write(f"Question: {response.question}")
        self._write(f"Oracle says: {response.answer}")
        self._write(f"Response time: {response.response_time:%Y-%m-%d %H:%M:%S} UTC")
        self._write(f"\nTotal possible answers: {len(self._oracle.all_answers())}")


def build_host(config: Optional[EnvironmentConfig] = None, write: Callable[[str], None] = print) -> ApplicationHost:
    cfg = config or ServiceLocator.config()
    return ApplicationHost(
        config=cfg,
        convert_usecase=ServiceLocator.convert_float_to_int_usecase(),
        oracle_usecase=ServiceLocator.ask_oracle_usecase(),
        write=write,
    )
