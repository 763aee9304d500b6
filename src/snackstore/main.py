"""Application entry point for the SnackStore backend server."""

from snackstore.app import App
from snackstore.config import Config
from snackstore.logging import setup_logging
from snackstore.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
