"""Uvicorn server runner."""

import copy

import structlog
import uvicorn
from uvicorn.config import LOGGING_CONFIG

from snackstore.app import App
from snackstore.config import Config
from snackstore.web.server import create_fastapi_app

logger = structlog.get_logger(__name__)


def build_log_config(debug: bool) -> dict:
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - %(client_addr)s "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"
    if not debug:
        log_config["loggers"]["uvicorn.access"]["level"] = "WARNING"
    return log_config


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)
    logger.info("server_starting", host=config.host, port=config.port, debug=config.debug)

    uvicorn.run(
        fastapi_app, host=config.host, port=config.port, log_config=build_log_config(config.debug), access_log=True
    )
