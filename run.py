# -*- coding: utf-8 -*-
# ============================================================================ #
# GardenStockBot (GSB)                                                         #
# Copyright (c) 2025 MAX                                                       #
# Licensed under the MIT License                                               #
# ============================================================================ #

"""
Single Entry Point for GardenStockBot (GSB).
Starts both the liveness endpoint (via Waitress) and the Discord Bot in a single process.
"""

import os
import sys
import threading
import time

from waitress import serve

from app.bootstrap import configure_environment
from app.web import create_app
from bot import main as run_bot
from utils.logging_utils import get_module_logger

# Setup logger
logger = get_module_logger("main")


def start_web_server():
    """Starts the Flask liveness app using Waitress in a separate thread."""
    app = create_app()
    port = app.config["PORT"]
    logger.info(f"🌐 Liveness endpoint listening on port {port}")
    try:
        serve(
            app,
            host=app.config["HOST"],
            port=port,
            threads=2,
            ident="GSB-Web",
            _quiet=True,
        )
    except OSError as e:
        # The bot keeps running without the endpoint
        logger.critical(f"🔥 Web Server failed to start: {e}", exc_info=True)


def main():
    """Main execution flow."""
    logger.info("==================================================")
    logger.info("     GardenStockBot (GSB) - Startup Sequence      ")
    logger.info("==================================================")

    # PORT may come from .env
    configure_environment()

    # Daemon thread: killed automatically when the bot (main thread) exits
    web_thread = threading.Thread(target=start_web_server, daemon=True, name="Web-Liveness")
    web_thread.start()

    time.sleep(float(os.environ.get("GSB_WEB_STARTUP_DELAY", "0.5")))

    logger.info("🤖 Starting Discord Bot...")
    try:
        run_bot()
    except KeyboardInterrupt:
        logger.info("🛑 Received KeyboardInterrupt, shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
