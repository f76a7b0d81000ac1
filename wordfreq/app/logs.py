import os
import logging
from logging.handlers import TimedRotatingFileHandler

from .settings import Settings
from .storage import ensure_dir

LOGGER_NAME = "wordfreq"
LOG_FORMAT = "%(asctime)s %(levelname)s [wordfreq] %(message)s"

def setup_logging(cfg: Settings) -> logging.Logger:
    """Consola + archivo diario rotado. Devuelve el logger listo para inyectar."""
    log = logging.getLogger(LOGGER_NAME)
    shutdown_logging(log)  # por si quedó configurado de una corrida anterior
    level = getattr(logging, cfg.LOG_LEVEL.upper(), None)
    log.setLevel(level if isinstance(level, int) else logging.INFO)
    log.propagate = False
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    log.addHandler(console)

    if cfg.LOG_FILE:
        try:
            ensure_dir(os.path.dirname(os.path.abspath(cfg.LOG_FILE)))
            fh = TimedRotatingFileHandler(
                cfg.LOG_FILE, when="midnight",
                backupCount=cfg.LOG_BACKUP_COUNT, encoding="utf-8"
            )
        except OSError as e:
            log.warning("file logging disabled path=%s err=%s", cfg.LOG_FILE, e)
        else:
            fh.setFormatter(formatter)
            log.addHandler(fh)

    return log

def shutdown_logging(log: logging.Logger):
    for h in list(log.handlers):
        try:
            h.flush()
        finally:
            h.close()
            log.removeHandler(h)
