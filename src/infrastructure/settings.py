"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_WEEK_START, MONDAY, SUNDAY
from src.domain.models.filters import TimeFrame, parse_time_frame
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


_WEEK_STARTS = {"monday": MONDAY, "sunday": SUNDAY}


@dataclass(frozen=True)
class VisualizerSettings:
    """Settings for the local finance visualizer.

    Attributes:
        db_url: SQLAlchemy URL of the local file store.
        week_starts_on: ``date.weekday()`` number of the first weekday.
        default_time_frame: Time frame selected when a file is opened.
    """

    db_url: str
    week_starts_on: int = DEFAULT_WEEK_START
    default_time_frame: TimeFrame = TimeFrame.THIS_MONTH

    @classmethod
    def from_env(cls) -> "VisualizerSettings":
        """Build settings from environment variables.

        Returns:
            VisualizerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("FINVIZ_DB_URL") or cls._default_db_url()
        week_starts_on = cls._parse_week_start(
            os.getenv("FINVIZ_WEEK_START", "sunday"),
            logger=logger,
        )
        default_time_frame = cls._parse_time_frame(
            os.getenv("FINVIZ_DEFAULT_TIME_FRAME", TimeFrame.THIS_MONTH.value),
            logger=logger,
        )
        return cls(
            db_url=db_url,
            week_starts_on=week_starts_on,
            default_time_frame=default_time_frame,
        )

    @staticmethod
    def _default_db_url() -> str:
        """Return the SQLite URL under the project ``data/`` directory."""
        path = get_project_root() / "data" / "finance_visualizer.db"
        return f"sqlite:///{path}"

    @staticmethod
    def _parse_week_start(raw_value: str, logger) -> int:
        """Map ``monday``/``sunday`` to a weekday number.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Weekday number; the default week start when invalid.
        """
        value = raw_value.strip().lower()
        if value in _WEEK_STARTS:
            return _WEEK_STARTS[value]
        logger.warning(
            f"Unknown FINVIZ_WEEK_START '{raw_value}'. "
            f"Expected monday or sunday."
        )
        return DEFAULT_WEEK_START

    @staticmethod
    def _parse_time_frame(raw_value: str, logger) -> TimeFrame:
        frame = parse_time_frame(raw_value.strip())
        if frame is None:
            logger.warning(
                f"Unknown FINVIZ_DEFAULT_TIME_FRAME '{raw_value}'. "
                f"Falling back to {TimeFrame.THIS_MONTH.value}."
            )
            return TimeFrame.THIS_MONTH
        return frame


__all__ = ["VisualizerSettings"]
