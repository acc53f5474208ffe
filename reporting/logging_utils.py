from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

import yaml

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(context)s | %(message)s"


class ContextFilter(logging.Filter):
    """Render the record's key=value context into ``%(context)s``."""

    def __init__(self, base_context: Optional[Mapping[str, object]] = None) -> None:
        super().__init__()
        self._base_context = dict(base_context or {})

    @staticmethod
    def render(context_map: Mapping[str, object]) -> str:
        if not context_map:
            return "-"
        return " ".join(f"{key}={context_map[key]}" for key in sorted(context_map))

    def filter(self, record: logging.LogRecord) -> bool:
        merged = dict(self._base_context)
        merged.update(getattr(record, "context_map", None) or {})
        record.context = self.render(merged)
        return True


class StructuredAdapter(logging.LoggerAdapter):
    """Carries a context mapping; ``context=`` on a call adds to it for that record."""

    def process(self, msg, kwargs: MutableMapping[str, object]):
        context_map = dict(self.extra.get("context_map", {}))
        context_map.update(kwargs.pop("context", None) or {})
        extra = kwargs.setdefault("extra", {})
        extra["context_map"] = {**extra.get("context_map", {}), **context_map}
        return msg, kwargs


def get_logger(name: str, *, context: Optional[Mapping[str, object]] = None) -> StructuredAdapter:
    return StructuredAdapter(logging.getLogger(name), {"context_map": dict(context or {})})


def setup_logging(
    level: str = "INFO",
    log_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    *,
    context: Optional[Mapping[str, object]] = None,
) -> None:
    """
    Configure the root logger for a scenario run.

    A YAML ``config_path`` is handed to ``logging.config.dictConfig`` as is,
    and the context filter is attached to the handlers of every logger.
    Otherwise a stream handler (plus a file handler when ``log_path`` is
    set) is installed with :data:`LOG_FORMAT`. Either way every record gets
    a ``context`` attribute from :class:`ContextFilter`.
    """
    context_filter = ContextFilter(context)
    root = logging.getLogger()

    if config_path is not None:
        with open(config_path, "r", encoding="utf-8") as f:
            logging.config.dictConfig(yaml.safe_load(f))
        loggers = [root] + [
            logger for logger in logging.Logger.manager.loggerDict.values()
            if isinstance(logger, logging.Logger)
        ]
        for logger in loggers:
            for handler in logger.handlers:
                handler.addFilter(context_filter)
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path), encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)
