import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from core.config import settings

class StationTimeFormatter(logging.Formatter):
    def __init__(self, fmt: str, tz_name: str) -> None:
        super().__init__(fmt=fmt)
        self.tz = ZoneInfo(tz_name)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        # Render timestamps in the station's local time
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone(self.tz)
        return dt.strftime("%Y-%m-%d %H:%M:%S %Z")

    def format(self, record: logging.LogRecord) -> str:
        # Extract just the module name from the dotted path
        record.name = record.name.split('.')[-1]
        return super().format(record)

def setup_logging() -> None:
    formatter = StationTimeFormatter(
        fmt="[%(levelname)s] %(asctime)s | %(name)s | %(message)s",
        tz_name=settings.timezone
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Remove existing handlers and add our custom handler
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
