"""The code generator: collects query structs and writes generated files."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional, Protocol, Union

from gormgen.geninfo import GenInfo

__all__ = ["Generator", "GeneratorError", "Logger", "Formatter"]

_CONTEXT_LINES = 5
_FILE_MODE = 0o640


class Logger(Protocol):
    """Anything that can record an informational message."""

    def info(self, msg: str) -> Any: ...


Formatter = Callable[[str, bytes], bytes]


class GeneratorError(Exception):
    """Raised when code cannot be generated or written."""


def _no_format(file_name: str, content: bytes) -> bytes:
    return content


def _error_line(exc: Exception) -> int:
    parts = str(exc).split(":")
    if len(parts) < 2:
        return 0
    try:
        return int(parts[1].strip())
    except ValueError:
        return 0


class Generator:
    """Collects model and query struct descriptions and writes their code.

    ``formatter`` receives the target file name and the rendered source and
    returns the formatted source; it raises when the source cannot be formatted.
    """

    def __init__(
        self,
        out_path: str,
        out_file: str = "",
        model_pkg_path: str = "",
        db: Any = None,
        logger: Optional[Logger] = None,
        formatter: Optional[Formatter] = None,
    ) -> None:
        self.out_path = out_path
        self.out_file = out_file
        self.model_pkg_path = model_pkg_path
        self.db = db
        self.data: dict[str, GenInfo] = {}
        self.models: dict[str, Any] = {}
        self._logger: Logger = logger if logger is not None else logging.getLogger(__name__)
        self._formatter: Formatter = formatter if formatter is not None else _no_format

    @property
    def logger(self) -> Logger:
        return self._logger

    def set_logger(self, logger: Logger) -> None:
        """Replace the logger that receives progress messages."""
        self._logger = logger

    def use_db(self, db: Any) -> None:
        """Use ``db`` as the database connection; ``None`` keeps the current one."""
        if db is not None:
            self.db = db

    def info(self, *args: str) -> None:
        """Report each message to the database logger, if any, and the logger."""
        db_logger = getattr(self.db, "logger", None) if self.db is not None else None
        for message in args:
            if db_logger is not None:
                db_logger.info(message)
            self._logger.info(message)

    def push_query_struct_meta(self, meta: Any) -> GenInfo:
        """Register a query struct, returning its entry.

        A struct name may only be registered again from the same source.
        """
        name = meta.model_struct_name
        info = self.data.get(name)
        if info is None:
            info = GenInfo(meta=meta)
            self.data[name] = info
        if info.meta.source != meta.source:
            raise GeneratorError(
                "cannot generate struct with the same name from different source:"
                f"{meta.struct_info.package}.{meta.model_struct_name} and "
                f"{info.meta.struct_info.package}.{info.meta.model_struct_name}"
            )
        return info

    def model_output_path(self) -> str:
        """Directory model files are written to, ending in a path separator."""
        if os.sep in self.model_pkg_path:
            out = os.path.abspath(self.model_pkg_path)
        else:
            out = os.path.join(os.path.dirname(self.out_path), self.model_pkg_path)
        return out + os.sep

    def output(self, file_name: str, content: Union[bytes, str]) -> None:
        """Format ``content`` and write it to ``file_name``."""
        if isinstance(content, str):
            content = content.encode()
        try:
            result = self._formatter(file_name, content)
        except Exception as exc:
            lines = content.decode(errors="replace").split("\n")
            err_line = _error_line(exc)
            print("Format fail:", err_line, exc)
            start = max(err_line - _CONTEXT_LINES, 0)
            end = min(err_line + _CONTEXT_LINES, len(lines) - 1)
            for number in range(start, end + 1):
                print(number, lines[number])
            raise GeneratorError(f"cannot format file: {exc}") from exc

        fd = os.open(file_name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(result)