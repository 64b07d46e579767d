"""liftbook - workout/template reconciliation engine."""

from liftbook.config.settings import settings
from liftbook.core.logger import setup_logger

setup_logger(settings)
