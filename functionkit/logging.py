from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import traceback
from typing import Callable, Dict, List, Optional, TextIO


_package_logger = logging.getLogger('functionkit')
_package_logger.addHandler(logging.NullHandler())


class FunctionKitLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax.

    Records carry the frame info of the code that called the logger in
    record.caller. Nothing is formatted, and no frame is inspected, unless the
    wrapped logger is enabled for the level."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log_from_caller(logging.DEBUG, format_string, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log_from_caller(logging.INFO, format_string, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log_from_caller(logging.WARNING, format_string, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log_from_caller(logging.ERROR, format_string, args, kwargs)

    def _log_from_caller(
        self,
        level: int,
        format_string: str,
        args: tuple,
        kwargs: Dict[str, object],
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        # [0] is this method, [1] is debug/info/..., [2] is their caller
        caller = inspect.stack(context=0)[2]
        try:
            _log(
                lambda msg, **kw: self._logger.log(level, msg, **kw),
                format_string,
                caller,
                list(args),
                dict(kwargs),
            )
        finally:
            # break the frame <-> local reference cycle
            del caller


def get_logger(name: str) -> FunctionKitLogger:
    return FunctionKitLogger(logging.getLogger(name))


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller: Optional[inspect.FrameInfo] = getattr(obj, 'caller', None)
            path_name = caller.filename if caller else obj.pathname
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                'level_name': obj.levelname,
                'path_name': path_name,
                'file_name': pathlib.Path(path_name).name,
                'module': (
                    caller.frame.f_globals.get('__name__')
                    if caller
                    else obj.module
                ),
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': caller.lineno if caller else obj.lineno,
                'function_name': caller.function if caller else obj.funcName,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process_name': obj.processName,
                'process': obj.process,
            }
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


def log_to_stream(
    stream: TextIO, level: int = logging.DEBUG
) -> logging.Handler:
    """Send the package's log records to stream as JSON lines.

    Returns the installed handler so that the caller can remove it again."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    handler.setLevel(level)
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    return handler


def _log(
    logging_method: Callable,
    format_string: str,
    caller: inspect.FrameInfo,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = None
    if 'exc_info' in kwargs:
        exc_info = kwargs['exc_info']
        del kwargs['exc_info']
    logging_method(
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
