import logging
from functools import lru_cache

from flatdocs.models.config import EngineConfig

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> EngineConfig:
    """FastAPI dependency returning the process-wide configuration."""
    config = EngineConfig()
    logger.info("Engine configured", extra={"content_dir": str(config.content_dir)})
    return config
