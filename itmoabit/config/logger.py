# itmoabit/config/logger.py
import logging
import sys

from itmoabit.config.config import settings

LOG_LEVEL = settings.log_level or ("DEBUG" if settings.env == "dev" else "INFO")

# корневой логгер проекта
logger = logging.getLogger("itmoabit")
logger.setLevel(LOG_LEVEL)

# stdout занят отчётом, логи пишем в stderr
handler = logging.StreamHandler(sys.stderr)
handler.setLevel(LOG_LEVEL)

# форматтер: время, уровень, [имя логгера], сообщение
fmt = logging.Formatter(
    "%(asctime)s %(levelname)-5s [itmoabit] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
handler.setFormatter(fmt)
logger.addHandler(handler)
