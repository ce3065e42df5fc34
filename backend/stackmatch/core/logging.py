"""
Logging para StackMatch.

El paquete nunca toca el logger raíz por sí mismo: todos los loggers cuelgan
de "stackmatch" y solo tienen un NullHandler. El proceso host que quiera ver
las trazas llama a configure_logging() una vez al arrancar.
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal, Optional

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "stackmatch"

# Símbolos para visualizar el flujo
FLOW_SYMBOLS = {
    "start": "╔",
    "node": "║",
    "arrow": "→",
    "end": "╚",
    "route": "◆",
}

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def _configure_root_logger(level: LogLevel, log_dir: Optional[Path] = None) -> None:
    """Configura el logger raíz con handlers de consola y, opcionalmente, archivo."""
    root = logging.getLogger()
    if root.handlers:
        return

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    # Handler de consola (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Handler de archivo con rotación diaria (mantiene 7 días)
    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                log_dir / "stackmatch.log",
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        except OSError:
            # Si falla la creación del archivo, solo usar consola
            root.warning("Could not create log file in %s; logging to console only", log_dir)

    root.setLevel(level)


def configure_logging(settings=None) -> None:
    """
    Configura el logger raíz a partir de Settings (STACKMATCH_LOG_LEVEL,
    STACKMATCH_LOG_DIR). Pensado para el proceso host; no hace nada si el
    logger raíz ya tiene handlers.

    Uso:
        from stackmatch.core.logging import configure_logging
        configure_logging()
    """
    if settings is None:
        from stackmatch.core.config import get_settings
        settings = get_settings()

    _configure_root_logger(settings.log_level, settings.log_dir)


def get_logger(name: str) -> logging.Logger:
    """
    Retorna el logger "stackmatch.<name>". No configura handlers.

    Uso:
        from stackmatch.core.logging import get_logger
        logger = get_logger("ranker")
        logger.debug("Mensaje")
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class RankingLogger:
    """Logger especializado para trazabilidad de rankings de catálogo."""

    def __init__(self, ranker_name: str):
        self._logger = get_logger(f"ranker.{ranker_name}")
        self.ranker_name = ranker_name

    def ranking_start(self, kind: str, catalog_size: int, project_tags: list) -> None:
        """Log inicio de un ranking."""
        tags = ", ".join(str(t) for t in project_tags) or "none"
        self._logger.debug(
            f"{FLOW_SYMBOLS['start']}══ RANKING START [{kind.upper()}] "
            f"{FLOW_SYMBOLS['arrow']} {catalog_size} items | project tags: {tags}"
        )

    def ranking_end(self, kind: str, ranked: list) -> None:
        """Log fin del ranking con resumen."""
        recommended = sum(1 for s in ranked if s.is_recommended)
        top = ranked[0].item.slug if ranked else "N/A"
        self._logger.debug(
            f"{FLOW_SYMBOLS['end']}══ RANKING COMPLETE [{kind.upper()}] "
            f"{FLOW_SYMBOLS['route']} {recommended}/{len(ranked)} recommended | top: {top}"
        )

    def demoted(self, kind: str, slug: str, score: int, cap: int) -> None:
        """Log de un item degradado por el límite de recomendaciones."""
        self._logger.debug(
            f"{FLOW_SYMBOLS['node']} [{kind.upper()}] {FLOW_SYMBOLS['arrow']} "
            f"demoted '{slug}' (score {score}, cap {cap})"
        )
