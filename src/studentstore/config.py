import logging
import structlog
import pydantic
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    store_path: str = pydantic.Field(
        "StudentsData",
        description="Directory holding one file per student.",
    )
    log_level: Literal["debug", "info", "warning", "error", "critical"] = pydantic.Field(
        "info",
        description="Logging level.",
    )
    log_file: str = pydantic.Field(
        "STDOUT",
        description="Path to the log file.",
    )
    log_format: Literal["text", "json"] = pydantic.Field(
        "text",
        description="Log format.",
    )

    @pydantic.field_validator("log_level", mode="before")
    @classmethod
    def _lower_level(cls, value):
        return value.lower() if isinstance(value, str) else value

    model_config = SettingsConfigDict(env_prefix="studentstore_")


def load_config(**overrides) -> Config:
    config = Config(**{k: v for k, v in overrides.items() if v is not None})
    # configure log output
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(),
    ]
    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    if config.log_file == "STDOUT":
        factory = structlog.PrintLoggerFactory()
    else:
        factory = structlog.PrintLoggerFactory(file=open(config.log_file, "a"))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.log_level.upper())
        ),
        logger_factory=factory,
    )
    return config
