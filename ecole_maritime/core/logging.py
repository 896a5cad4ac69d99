import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Handler unique sur le logger racine ; idempotent (reload uvicorn, tests)."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(getattr(h, "_ecole_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._ecole_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
