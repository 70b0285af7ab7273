from __future__ import annotations

import sys
from typing import List

from .args import parse_args
from .assets import load_bundled_reference
from .errors import CddError, LaunchError, NotInstalledError, SelectionCancelled
from .output import error, error_exit, warning
from .run import run_install, run_task
from .uninstall import uninstall


def describe_os_error(exc: OSError) -> str:
    message = exc.strerror or str(exc)
    if exc.filename is not None:
        return f"{exc.filename}: {message}"
    return message


def main(argv: List[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    cfg = parse_args(args)

    try:
        if cfg.command == "uninstall":
            uninstall(cfg.workspace)
            return
        reference = load_bundled_reference()
        if cfg.command == "install":
            run_install(cfg, reference)
        else:
            run_task(cfg, reference)
    except SelectionCancelled as exc:
        warning(str(exc))
        sys.exit(1)
    except NotInstalledError as exc:
        error("Error: %s", exc)
        error_exit(exc.hint)
    except LaunchError as exc:
        error("Error: %s", exc)
        error_exit(exc.hint)
    except CddError as exc:
        error_exit("Error: %s", exc)
    except OSError as exc:
        error_exit("Error: %s", describe_os_error(exc))


if __name__ == "__main__":
    main()
