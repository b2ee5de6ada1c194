"""
Entry point for running the zero-based budget API server.

Usage:
    zerobudget [--port PORT] [--host HOST] [--no-browser] [--reload]
"""

import argparse
import webbrowser

import qrcode
import structlog
import uvicorn

logger = structlog.get_logger()


def print_qr_code(url: str) -> None:
    """Print ``url`` as a terminal QR code so a phone on the LAN can open the docs."""
    qr = qrcode.QRCode(border=1, box_size=1)
    qr.add_data(url)
    qr.print_ascii(invert=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zerobudget", description="Serve the zero-based budget API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="restart on source changes")
    parser.add_argument("--no-browser", action="store_true", help="skip opening the docs page")
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    docs_url = f"http://{args.host}:{args.port}/docs"

    logger.info("api_starting", host=args.host, port=args.port, docs=docs_url)
    try:
        print_qr_code(docs_url)
    except (OSError, ValueError) as exc:
        logger.warning("qr_code_unavailable", error=str(exc))

    if not args.no_browser:
        webbrowser.open(docs_url)

    uvicorn.run(
        "zerobudget.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
