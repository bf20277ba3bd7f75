import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "HOMEBILLS_"}

    # App
    log_level: str = "INFO"

    # Emit debug records from the cycle resolver (see cycle_tracer)
    trace_cycles: bool = False

    # Household summary: bills due within this many days are flagged
    upcoming_window_days: int = 7


# Logger the cycle resolver traces through when handed to it
CYCLE_TRACE_LOGGER = "homebills.engine.cycle"

settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cycle_tracer() -> logging.Logger | None:
    """Logger to pass as resolve_item_cycle(tracer=...) when tracing is enabled."""
    if not settings.trace_cycles:
        return None
    return logging.getLogger(CYCLE_TRACE_LOGGER)
