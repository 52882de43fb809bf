# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Structured logging helpers for :mod:`fixturetree`.

Every record emitted by the library carries an ``event`` name such as
``fixturetree.file.write`` and a ``context`` mapping with the root-relative
path and related details. Nothing is configured on import; test suites that
want to see materialization traces call :func:`configure_logging` or set
``FIXTURETREE_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from collections.abc import Mapping, MutableMapping
from datetime import UTC, datetime
from typing import Any, Final, cast, override

__all__ = [
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]

_LOG_LEVEL_ENV: Final = "FIXTURETREE_LOG_LEVEL"
_LOG_FORMAT_ENV: Final = "FIXTURETREE_LOG_FORMAT"
_TEXT_FORMAT: Final = (
    "%(asctime)s %(levelname)-7s %(name)s [%(event)s] %(message)s %(context)s"
)

type Context = Mapping[str, object]


def _split_payload(
    kwargs: MutableMapping[str, Any], base: Context
) -> tuple[str, dict[str, object]]:
    """Pop ``event``/``context`` from logging kwargs and merge them with ``base``."""
    extra = cast(Mapping[str, object], kwargs.get("extra") or {})
    event = kwargs.pop("event", None) or extra.get("event")
    if not isinstance(event, str):
        raise TypeError("Structured logs require an 'event' field.")

    inline = kwargs.pop("context", None) or {}
    if not isinstance(inline, Mapping):
        raise TypeError("context must be a mapping when provided.")

    context = {**base, **cast(Context, inline)}
    context.update((key, value) for key, value in extra.items() if key != "event")
    return event, context


class StructuredLogger(logging.LoggerAdapter[logging.Logger]):
    """Adapter turning ``event=``/``context=`` keywords into record attributes.

    The adapter's own ``extra`` is the baseline context shared by every
    record; :meth:`bind` derives a child with more baseline keys.
    """

    def __init__(
        self, logger: logging.Logger, *, context: Context | None = None
    ) -> None:
        super().__init__(logger, dict(context or {}))

    def bind(self, **context: object) -> StructuredLogger:
        """Return a child adapter whose baseline context also holds ``context``."""
        merged = {**cast(Context, self.extra), **context}
        return type(self)(self.logger, context=merged)

    @override
    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        event, context = _split_payload(kwargs, cast(Context, self.extra))
        kwargs["extra"] = {"event": event, "context": context}
        return msg, kwargs


def get_logger(name: str, *, context: Context | None = None) -> StructuredLogger:
    """Return a :class:`StructuredLogger` for ``name``."""
    return StructuredLogger(logging.getLogger(name), context=context)


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.upper())
    if resolved is None:
        raise TypeError(f"Unknown log level: {level!r}")
    return resolved


def _formatters() -> dict[str, dict[str, object]]:
    return {
        "text": {
            "format": _TEXT_FORMAT,
            "datefmt": "%H:%M:%S",
            "defaults": {"event": "-", "context": ""},
        },
        "json": {"()": f"{__name__}._JsonFormatter"},
    }


def configure_logging(
    *,
    level: int | str | None = None,
    json_mode: bool | None = None,
    env: Mapping[str, str] | None = None,
    force: bool = False,
) -> None:
    """Route fixturetree events to stderr.

    Arguments win over ``FIXTURETREE_LOG_LEVEL`` (default ``INFO``) and
    ``FIXTURETREE_LOG_FORMAT`` (``json`` or ``text``). If the root logger
    already has handlers, for instance pytest's capture handler, only its
    level is changed unless ``force`` is set.
    """
    env = os.environ if env is None else env
    resolved_level = _coerce_level(level or env.get(_LOG_LEVEL_ENV) or logging.INFO)
    if json_mode is None:
        json_mode = env.get(_LOG_FORMAT_ENV, "").strip().lower() == "json"

    root = logging.getLogger()
    if root.handlers and not force:
        root.setLevel(resolved_level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": _formatters(),
            "handlers": {
                "fixturetree": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "json" if json_mode else "text",
                }
            },
            "root": {"handlers": ["fixturetree"], "level": resolved_level},
        }
    )


class _JsonFormatter(logging.Formatter):
    """One compact JSON object per record."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", None),
            "message": record.getMessage(),
        }
        if context := getattr(record, "context", None):
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(
            {key: value for key, value in payload.items() if value is not None},
            default=repr,
            separators=(",", ":"),
        )
