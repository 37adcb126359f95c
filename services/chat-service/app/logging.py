import logging, sys

from app.config import settings
from app.middleware.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [rid=%(request_id)s cid=%(correlation_id)s] %(message)s"


def setup_logging(level: str | None = None):
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    # uvicorn --reload imports the app twice; keep a single stdout handler
    if any(getattr(h, "_chat_service", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    # Filter on the handler so records propagated from child loggers carry IDs too
    handler.addFilter(CorrelationIdFilter())
    handler._chat_service = True  # type: ignore[attr-defined]
    root.addHandler(handler)
