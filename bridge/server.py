"""
BridgeServer class for CLI control of the FastAPI application.
"""
import logging
import os
from typing import Optional

import uvicorn

import settings
from config import BridgeConfig
from .app import create_app

logger = logging.getLogger(__name__)


class BridgeServer:
    """Bridge server wrapper for CLI control"""

    def __init__(
        self,
        config: Optional[BridgeConfig] = None,
        debug: bool = False,
        bind_address: Optional[str] = None,
        port: Optional[int] = None,
    ):
        self.server = None
        self.uvicorn_config = None
        self.config = config or BridgeConfig.from_settings()
        self.debug = debug
        self.bind_address = bind_address or settings.BIND_ADDRESS
        self.port = port or settings.PORT
        self.app = create_app(self.config)

        if debug:
            self._setup_debug_logging()

    def _setup_debug_logging(self):
        """Send DEBUG logs to the console and an appended log file"""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        # Clear existing handlers to avoid duplicates
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        log_file = os.path.abspath(settings.DEBUG_LOG_FILE)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        logger.info(f"Debug logging enabled - appending to {log_file}")

    @property
    def base_url(self) -> str:
        return f"http://{self.bind_address}:{self.port}"

    def run(self):
        """Run the bridge server (blocking)"""
        logger.info(f"Starting Canvas OAuth Bridge for {self.config.institution_name} on {self.base_url}")
        logger.info("Available endpoints: /, /authorize, /callback, /token")
        if self.config.passthrough_enabled:
            logger.info(f"Pass-through enabled: /api/v1/* -> {self.config.upstream_base_url}")
        self.uvicorn_config = uvicorn.Config(
            self.app,
            host=self.bind_address,
            port=self.port,
            log_level="debug" if self.debug else str(settings.LOG_LEVEL).lower(),
            access_log=False  # request middleware logs each request
        )
        self.server = uvicorn.Server(self.uvicorn_config)
        self.server.run()

    def stop(self):
        """Stop the bridge server"""
        if self.server:
            self.server.should_exit = True
