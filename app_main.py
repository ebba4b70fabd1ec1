"""Application entry point for the Trivia Night host."""

from __future__ import annotations

import argparse
from pathlib import Path
import socket
import sys

from PySide6.QtWidgets import QApplication

from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_app.constants.presentation_constants import DEFAULT_SLIDE_FONT_SIZE
from trivia_app.core.library_file import LibraryImportError, load_library
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.services.trivia_repository import TriviaRepository
from trivia_app.server.api_server import start_api_server
from trivia_app.ui.host_main_window import HostMainWindow
from trivia_app.utils.logging_config import configure_logging


def _determine_audience_url(port: int) -> str:
    """Best-effort determination of the local IP for the audience-facing URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Author trivia rounds and present events.")
    parser.add_argument("--library", type=Path, help="JSON trivia library to open at startup")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Audience server bind address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Audience server port")
    parser.add_argument(
        "--font-size",
        type=int,
        default=DEFAULT_SLIDE_FONT_SIZE,
        help="Slide font size in points on the host screen",
    )
    parser.add_argument(
        "--no-server",
        action="store_true",
        help="Do not start the audience web server",
    )
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main() -> None:
    """Initialize logging, start the audience server, and launch the Qt UI."""
    logger = configure_logging()
    args = _parse_args(sys.argv[1:])
    logger.info("Starting Trivia Night host…")

    repository = TriviaRepository()
    if args.library is not None:
        try:
            repository = load_library(args.library)
        except (LibraryImportError, OSError) as exc:
            logger.error("Could not open library %s: %s", args.library, exc)
            sys.exit(1)

    presentation_manager = PresentationManager(repository)
    audience_url = None
    if not args.no_server:
        start_api_server(presentation_manager, host=args.host, port=args.port)
        audience_url = _determine_audience_url(args.port)
        logger.info("Audience page available at %s", audience_url)

    app = QApplication(sys.argv)
    window = HostMainWindow(
        presentation_manager=presentation_manager,
        audience_url=audience_url,
        library_path=args.library,
    )
    window.presentation_panel.set_font_size(args.font_size)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
