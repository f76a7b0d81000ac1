# wordfreq/app/main.py

import sys
import logging
from typing import List, Optional

from .settings import Settings, settings
from .logs import setup_logging, shutdown_logging
from .frequency import analyze, summarize
from .storage import (
    ErrorKind, classify_error, input_exists, read_text, write_report
)

# ---------------------------------------------------------------------------
# Mensajes al usuario (stdout)
# ---------------------------------------------------------------------------
SUCCESS_MESSAGE = "Word frequency analysis completed successfully."

MESSAGES = {
    ErrorKind.USAGE: "Error: Please provide exactly two arguments - input file path and output file path.",
    ErrorKind.INPUT_NOT_FOUND: "Error: Input file does not exist.",
    ErrorKind.ACCESS_DENIED: "Error: Access to the file is denied. Please check file permissions.",
    ErrorKind.IO_ERROR: "Error: An I/O error occurred. {detail}",
    ErrorKind.UNEXPECTED: "An unexpected error occurred: {detail}",
}

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

def user_message(kind: ErrorKind, detail: str = "") -> str:
    return MESSAGES[kind].format(detail=detail)

def _fail(log: logging.Logger, kind: ErrorKind, detail: str = "") -> int:
    print(user_message(kind, detail))
    log.debug("run finished kind=%s", kind.value)
    return EXIT_FAILURE

# ---------------------------------------------------------------------------
# Pipeline: leer -> tokenizar/contar/ordenar -> escribir
# ---------------------------------------------------------------------------
def run(input_path: str, output_path: str, log: logging.Logger) -> int:
    try:
        log.info("starting word frequency analysis")
        log.debug("input=%s output=%s", input_path, output_path)

        if not input_exists(input_path):
            log.error("input file does not exist path=%s", input_path)
            return _fail(log, ErrorKind.INPUT_NOT_FOUND)

        log.info("reading input file")
        text = read_text(input_path)

        log.info("processing word frequencies")
        report = analyze(text)
        total, distinct = summarize(report)
        log.info("frequencies computed tokens=%d distinct=%d", total, distinct)

        log.info("writing results to output file")
        res = write_report(report, output_path, log)
        if not res.ok:
            return _fail(log, res.kind, res.message)

        log.info("word frequency analysis completed successfully out=%s", res.path)
        print(SUCCESS_MESSAGE)
        return EXIT_OK

    except OSError as e:
        kind = classify_error(e)
        if kind is ErrorKind.ACCESS_DENIED:
            log.error("access to the file is denied", exc_info=True)
        else:
            log.error("an I/O error occurred", exc_info=True)
        return _fail(log, kind, str(e))
    except Exception as e:
        log.critical("an unexpected error occurred", exc_info=True)
        return _fail(log, ErrorKind.UNEXPECTED, str(e))

def main(argv: Optional[List[str]] = None, cfg: Optional[Settings] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    log = setup_logging(cfg or settings)
    try:
        if len(args) != 2:
            log.error("invalid number of arguments expected=2 provided=%d", len(args))
            print(user_message(ErrorKind.USAGE))
            return EXIT_USAGE
        return run(args[0], args[1], log)
    finally:
        shutdown_logging(log)

def cli():
    raise SystemExit(main())

if __name__ == "__main__":
    cli()
