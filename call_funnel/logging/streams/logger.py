from __future__ import annotations

import pathlib
from typing import Dict, TextIO

from .logger_stream import LoggerStream


class Logger:
    def __init__(self) -> None:
        self._streams: Dict[str, LoggerStream] = {}

    def __getitem__(self, name: str) -> LoggerStream:
        if self._streams.get(name) is None:
            self._streams[name] = LoggerStream(name=name)

        return self._streams[name]

    def configure(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> LoggerStream:
        if name is None:
            name = "default"

        filename: str | None = None
        directory: str | None = None

        if path:
            logfile_path = pathlib.Path(path)
            is_logfile = len(logfile_path.suffix) > 0

            filename = logfile_path.name if is_logfile else None
            directory = (
                str(logfile_path.parent.absolute())
                if is_logfile
                else str(logfile_path.absolute())
            )

        self._streams[name] = LoggerStream(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
            stdout=stdout,
            stderr=stderr,
        )

        return self._streams[name]
