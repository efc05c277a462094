import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Консольный логгер приложения; повторный вызов только меняет уровень"""
    global _configured
    root = logging.getLogger()
    root.setLevel(level.upper())
    
    if _configured:
        return
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    
    # uvicorn access log дублирует наши сообщения
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True
