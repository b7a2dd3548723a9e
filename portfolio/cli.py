import argparse

from portfolio.api.logging_config import logger
from portfolio.config import config


def build_parser():
    parser = argparse.ArgumentParser(prog="portfolio", description="Infinite Portfolio server")
    subparsers = parser.add_subparsers(dest="subcommand", required=True)

    subparsers.add_parser("status", help="Show how to start the server")
    start_parser = subparsers.add_parser("start", help="Start the web server")
    start_parser.add_argument(
        "--host", default=config.get("server", "host"), help="Host to bind the server to"
    )
    start_parser.add_argument(
        "--port", type=int, default=config.get("server", "port"), help="Port to run the server on"
    )
    return parser


def dispatch(args):
    """Dispatch CLI subcommands using a simple lookup table.

    Unknown subcommands raise ``ValueError``.
    """

    def _status() -> None:
        logger.info("run `portfolio start` to start the server")

    def _start() -> None:
        import uvicorn

        from portfolio.api.main import app

        logger.info(f"Starting server at {args.host}:{args.port}")
        uvicorn.run(app, host=args.host, port=args.port)

    commands = {"status": _status, "start": _start}
    try:
        handler = commands[args.subcommand]
    except KeyError as exc:
        message = f"No handler for subcommand: {args.subcommand}"
        logger.error(message)
        raise ValueError(message) from exc

    handler()


def main(argv=None):
    args = build_parser().parse_args(argv)
    dispatch(args)


if __name__ == "__main__":
    main()
