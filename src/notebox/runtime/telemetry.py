"""Logging and profiling for notebox, on top of telelog.

The terminal belongs to the Textual UI, so nothing is written to the console
unless ``NOTEBOX_LOG_CONSOLE`` asks for it. Settings come from one of the
named presets or from ``NOTEBOX_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

import telelog  # type: ignore[import]

ENV_PREFIX = "NOTEBOX_"
_TRUTHY = {"1", "true", "yes", "on"}

PRESET_SETTINGS: Dict[str, Dict[str, Any]] = {
    "development": {"level": "DEBUG", "console": True, "color": True},
    "production": {"level": "INFO", "file": "notebox.log", "buffered": True},
    "performance": {
        "level": "DEBUG",
        "json": True,
        "buffered": True,
        "file": "notebox-performance.log",
    },
}
PRESETS = tuple(PRESET_SETTINGS)

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(ENV_PREFIX + name)


def _flag(name: str) -> bool:
    return (_env(name) or "").lower() in _TRUTHY


def env_settings() -> Dict[str, Any]:
    """Settings read from ``NOTEBOX_LOG_*`` (and ``NOTEBOX_NO_COLOR``)."""

    console = _flag("LOG_CONSOLE")
    settings: Dict[str, Any] = {
        "level": (_env("LOG_LEVEL") or "INFO").upper(),
        "console": console,
        "color": console and not _flag("NO_COLOR"),
        "json": _flag("LOG_JSON"),
        "buffered": _flag("LOG_BUFFERED"),
    }
    if _env("LOG_FILE"):
        settings["file"] = _env("LOG_FILE")
    if settings["buffered"]:
        settings["buffer_size"] = int(_env("LOG_BUFFER_SIZE") or "2048")
    return settings


def build_config(settings: Dict[str, Any]) -> Any:
    config = telelog.Config()
    config.with_min_level(settings.get("level", "INFO"))
    config.with_console_output(bool(settings.get("console")))
    if settings.get("console"):
        config.with_colored_output(bool(settings.get("color")))
    if settings.get("json"):
        config.with_json_format(True)
    if settings.get("file"):
        config.with_file_output(settings["file"])
    if settings.get("buffered"):
        config.with_buffering(True)
        if "buffer_size" in settings:
            config.with_buffer_size(settings["buffer_size"])
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog config and drop cached loggers.

    Pass a ready ``config`` or a ``preset`` name, not both. With neither,
    ``NOTEBOX_LOG_PRESET`` picks a preset, else the environment is read.
    ``NOTEBOX_LOG_FILE`` overrides a preset's file.
    """

    global _config
    if config is not None and preset:
        raise ValueError("configure() takes a config or a preset, not both")
    if config is None:
        preset = preset or _env("LOG_PRESET")
        if preset:
            if preset not in PRESET_SETTINGS:
                raise ValueError(f"Unknown log preset '{preset}', expected one of {PRESETS}")
            settings = dict(PRESET_SETTINGS[preset])
            if _env("LOG_FILE"):
                settings["file"] = _env("LOG_FILE")
        else:
            settings = env_settings()
        config = build_config(settings)
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    name = name or _env("LOGGER") or "notebox"
    if name not in _loggers:
        if _config is None:
            configure()
        _loggers[name] = telelog.Logger.with_config(name, _config)
    return _loggers[name]


def _log(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    pairs = [(str(key), str(value)) for key, value in fields.items()]
    with_fields = getattr(logger, f"{level}_with", None)
    if with_fields is not None:
        with_fields(message, pairs)
    else:
        getattr(logger, level)(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as key/value fields."""

    _log(get_logger(logger_name), level.lower(), f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    name: str
    logger: Any
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = str(value)

    def _fields(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            fields["component"] = self.component
        return fields

    def fail(self, reason: str) -> None:
        _log(self.logger, "error", "span::fail", {**self._fields(), "reason": reason})

    def finish(self) -> None:
        _log(self.logger, "debug", "span::done", self._fields())


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``, with ``metadata`` as logger context.

    ``component=True`` tracks the block as a component called ``name``; a
    string names the component. A raised exception is logged, then re-raised.
    """

    logger = get_logger(logger_name)
    handle = SpanHandle(name, logger, name if component is True else component or None)
    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            logger.add_context(key, str(value))
            stack.callback(logger.remove_context, key)
        if handle.component:
            stack.enter_context(logger.track_component(handle.component))
        stack.enter_context(logger.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        handle.finish()


__all__ = [
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "env_settings",
    "get_logger",
    "record_event",
    "span",
]
