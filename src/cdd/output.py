from __future__ import annotations

import sys

GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
RED = "\033[0;31m"
NC = "\033[0m"


def _format(message: str, args: tuple[object, ...]) -> str:
    return message % args if args else message


def _paint(color: str, text: str, stream) -> str:
    if not stream.isatty():
        return text
    return color + text + NC


def success(message: str, *args: object) -> None:
    print(_paint(GREEN, _format(message, args), sys.stdout))


def warning(message: str, *args: object) -> None:
    print(_paint(YELLOW, _format(message, args), sys.stderr), file=sys.stderr)


def error(message: str, *args: object) -> None:
    print(_paint(RED, _format(message, args), sys.stderr), file=sys.stderr)


def error_exit(message: str, *args: object, exit_code: int = 1) -> None:
    error(message, *args)
    sys.exit(exit_code)


def info(message: str, *args: object) -> None:
    print(_format(message, args))
