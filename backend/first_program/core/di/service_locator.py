from typing import Optional

from first_program.core.config.environment_config import EnvironmentConfig
from first_program.data.repositories.static_answer_repository_impl import StaticAnswerRepositoryImpl
from first_program.domain.usecases.ask_oracle_usecase import AskOracleUseCase
from first_program.domain.usecases.convert_float_to_int_usecase import ConvertFloatToIntUseCase


class ServiceLocator:
    _config: Optional[EnvironmentConfig] = None
    _answer_repo: Optional[StaticAnswerRepositoryImpl] = None
    _convert_usecase: Optional[ConvertFloatToIntUseCase] = None
    _oracle_usecase: Optional[AskOracleUseCase] = None

    @classmethod
    def config(cls) -> EnvironmentConfig:
        if cls._config is None:
            cls._config = EnvironmentConfig()
        return cls._config

    @classmethod
    def answer_repository(cls) -> StaticAnswerRepositoryImpl:
        if cls._answer_repo is None:
            cls._answer_repo = StaticAnswerRepositoryImpl()
        return cls._answer_repo

    @classmethod
    def convert_float_to_int_usecase(cls) -> ConvertFloatToIntUseCase:
        if cls._convert_usecase is None:
            cls._convert_usecase = ConvertFloatToIntUseCase()
        return cls._convert_usecase

    @classmethod
    def ask_oracle_usecase(cls) -> AskOracleUseCase:
        if cls._oracle_usecase is None:
            cls._oracle_usecase = AskOracleUseCase(repository=cls.answer_repository())
        return cls._oracle_usecase

    @classmethod
    def reset(cls) -> None:
        """Drop every cached instance; the next access rebuilds from the environment."""
        cls._config = None
        cls._answer_repo = None
        cls._convert_usecase = None
        cls._oracle_usecase = None
