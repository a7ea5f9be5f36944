from __future__ import annotations

import os
import pathlib
import sys
import threading
from typing import (
    Callable,
    Dict,
    TextIO,
    TypeVar,
)

import msgspec

from call_funnel.logging.config import LoggingConfig, StreamType
from call_funnel.logging.models import Entry, Log

T = TypeVar("T", bound=Entry)

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    """
    Synchronous log writer.

    Entries are rendered through a template onto stdout/stderr, or
    appended as msgspec encoded JSON lines when a logfile is configured.
    A failure to write is reported on stderr and never propagates to the
    code being logged.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory
        self._config = LoggingConfig()
        self._stdout = stdout
        self._stderr = stderr
        self._encoder = msgspec.json.Encoder()
        self._lock = threading.Lock()

    @property
    def name(self):
        return self._name

    def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        log_file, line_number, function_name = self._find_caller()
        log = Log(
            entry=entry,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
        )

        logfile_path = self._to_logfile_path()
        if logfile_path:
            self._log_to_file(log, logfile_path)

        else:
            self._log(log, template=template)

    def _log(
        self,
        log: Log[T],
        template: str | None = None,
    ):
        if template is None:
            template = self._default_template or DEFAULT_TEMPLATE

        stream = self._stdout_stream if (
            self._config.output == StreamType.STDOUT
        ) else self._stderr_stream

        try:
            stream.write(
                log.entry.to_template(
                    template,
                    context=self._to_context(log),
                )
                + "\n"
            )
            stream.flush()

        except Exception as err:
            self._write_error(log, err)

    def _log_to_file(self, log: Log[T], logfile_path: str):
        try:
            with self._lock:
                os.makedirs(os.path.dirname(logfile_path), exist_ok=True)

                with open(logfile_path, "ab") as logfile:
                    logfile.write(self._encoder.encode(log) + b"\n")

        except Exception as err:
            self._write_error(log, err)

    def _write_error(self, log: Log[T], err: Exception):
        stderr = self._stderr_stream

        try:
            if stderr.closed:
                return

            stderr.write(
                log.entry.to_template(
                    ERROR_TEMPLATE,
                    context={
                        **self._to_context(log),
                        "error": str(err),
                    },
                )
                + "\n"
            )

        except Exception:
            pass

    def _to_context(self, log: Log[T]) -> Dict[str, str | int]:
        return {
            "filename": log.filename,
            "function_name": log.function_name,
            "line_number": log.line_number,
            "thread_id": log.thread_id,
            "timestamp": log.timestamp,
        }

    def _to_logfile_path(self) -> str | None:
        directory = self._default_log_directory or self._config.directory
        filename = self._default_logfile

        if directory is None and filename is None:
            return None

        if filename is None:
            filename = "logs.json"

        if directory is None:
            directory = os.getcwd()

        return str(pathlib.Path(directory, filename).absolute())

    @property
    def _stdout_stream(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _stderr_stream(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
