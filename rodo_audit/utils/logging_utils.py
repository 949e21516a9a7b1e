import logging
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "rodo-audit"


def configure_logging(level: str = "INFO", environment: str = "development") -> None:
    if getattr(configure_logging, "_configured", False):
        return

    handler = logging.StreamHandler(sys.stdout)
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        static_fields={"service": SERVICE_NAME, "environment": environment},
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers = [handler]

    # uvicorn installs its own plain-text handlers; route them through the JSON one
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
    configure_logging._configured = True
