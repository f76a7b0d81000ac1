import os
import logging
import pathlib
import tempfile
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .frequency import WordCount

_log = logging.getLogger("wordfreq")

class ErrorKind(str, Enum):
    USAGE           = "USAGE"
    INPUT_NOT_FOUND = "INPUT_NOT_FOUND"
    ACCESS_DENIED   = "ACCESS_DENIED"
    IO_ERROR        = "IO_ERROR"
    UNEXPECTED      = "UNEXPECTED"

@dataclass(frozen=True)
class WriteResult:
    ok: bool
    path: str
    kind: Optional[ErrorKind] = None
    message: str = ""

def classify_error(exc: BaseException) -> ErrorKind:
    if isinstance(exc, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(exc, OSError):
        return ErrorKind.IO_ERROR
    return ErrorKind.UNEXPECTED

def ensure_dir(p: str):
    pathlib.Path(p).mkdir(parents=True, exist_ok=True)

def input_exists(path: str) -> bool:
    # un directorio no cuenta como archivo de entrada
    return os.path.isfile(path)

def read_text(path: str) -> str:
    """Lectura completa en UTF-8; descarta BOM y reemplaza bytes inválidos."""
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        return f.read()

def format_report(report: List[WordCount]) -> str:
    return "".join(f"{wc.line()}\n" for wc in report)

def _target_mode(path: str) -> int:
    try:
        return os.stat(path).st_mode & 0o777
    except OSError:
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask

def _describe(exc: OSError, path: str) -> str:
    # el error de mkstemp nombra el temporal; se reporta el destino real
    if exc.strerror:
        return f"[Errno {exc.errno}] {exc.strerror}: '{path}'"
    return str(exc)

def _write_in_place(report: List[WordCount], path: str):
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        out.write(format_report(report))

def write_report(report: List[WordCount], output_path: str,
                 log: Optional[logging.Logger] = None) -> WriteResult:
    """
    Escribe `word:count` por línea (terminador \\n, también en la última) en UTF-8 sin BOM.
    Se escribe a un temporal en el mismo directorio y luego os.replace: el destino
    queda completo o intacto. Los fallos se devuelven clasificados, no se relanzan.
    """
    log = log or _log
    # un symlink se sigue: se reemplaza el archivo real, no el enlace
    target = os.path.realpath(output_path)
    out_dir = os.path.dirname(target)
    tmp_path: Optional[str] = None
    try:
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".wordfreq-", suffix=".tmp", dir=out_dir)
        except PermissionError:
            # directorio de solo lectura pero archivo existente escribible: sin atomicidad
            if not (os.path.isfile(target) and os.access(target, os.W_OK)):
                raise
            log.warning("output directory not writable, writing in place path=%s", output_path)
            _write_in_place(report, target)
        else:
            with open(fd, "w", encoding="utf-8", newline="\n") as out:
                out.write(format_report(report))
            os.chmod(tmp_path, _target_mode(target))
            os.replace(tmp_path, target)
            tmp_path = None
        log.debug("report written path=%s lines=%d", output_path, len(report))
        return WriteResult(ok=True, path=output_path)
    except OSError as e:
        log.error("error writing output file path=%s", output_path, exc_info=True)
        return WriteResult(ok=False, path="", kind=classify_error(e), message=_describe(e, output_path))
    finally:
        if tmp_path is not None:
            with suppress(OSError):
                os.remove(tmp_path)
