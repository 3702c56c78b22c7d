"""Entry point: ``python -m wiredriver [settings.yaml]``.

Queries the configured remote end's ``/status`` and prints a report.
"""

from __future__ import annotations

import logging
import sys

from wiredriver.diagnostics.screenshot_sink import FileScreenshotSink
from wiredriver.exceptions import WireDriverError
from wiredriver.reporting.console import print_banner, print_failure, print_status_report
from wiredriver.session.remote_session import fetch_server_status
from wiredriver.settings import DriverSettings
from wiredriver.transport.httpx_transport import HttpxTransport


def _configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = DriverSettings.from_yaml(argv[0] if argv else None)
    except WireDriverError as exc:
        _configure_logging()
        print_failure(str(exc))
        return 2

    _configure_logging(settings.log_level)
    print_banner(settings.executor)
    transport = HttpxTransport.from_settings(settings)
    try:
        status = fetch_server_status(
            settings.executor, transport, FileScreenshotSink(settings.screenshot_dir)
        )
    except WireDriverError as exc:
        logging.getLogger(__name__).debug("Status request failed.", exc_info=True)
        print_failure(str(exc))
        return 1
    finally:
        transport.close()

    print_status_report(status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
