import logging
import signal
from typing import Optional

from app_config import (
    AppConfigurationError,
    load_app_config,
    log_level,
    resolve_config_path,
)
from runtime import RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from server import ServerConfigurationError, UIServer, UIServerConfig


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("pomodoro_app")


def setup_signal_handlers(engine: RuntimeEngine) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        del frame
        logging.getLogger("pomodoro_app").info(
            "Signal %s received, stopping.", signal.Signals(signum).name
        )
        engine.request_stop()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def start_ui_server(settings, logger: logging.Logger) -> Optional[UIServer]:
    """Start the websocket UI server, or return None when it is disabled or broken."""
    try:
        config = UIServerConfig.from_settings(settings)
    except ServerConfigurationError as error:
        logger.error("UI server configuration error: %s", error)
        logger.warning("Continuing without UI server.")
        return None

    if not config.enabled:
        logger.info("UI server disabled by configuration")
        return None

    ui_server = UIServer(config=config, logger=logging.getLogger("ui_server"))
    try:
        ui_server.start(timeout_seconds=5.0)
    except (OSError, RuntimeError) as error:
        logger.error("UI server startup failed: %s", error)
        logger.warning("Continuing without UI server.")
        return None

    logger.info("UI ready at http://%s:%d", ui_server.host, ui_server.port)
    return ui_server


def main() -> int:
    """Run the pomodoro phase timer with its websocket UI server."""
    logger = setup_logging(level=logging.INFO)

    config_path = resolve_config_path()
    try:
        app_config = load_app_config()
    except AppConfigurationError as error:
        logger.error("App configuration error (%s): %s", config_path, error)
        return 1

    logger.info("Loaded runtime config: %s", app_config.source_file or "<defaults>")
    logging.getLogger().setLevel(log_level(app_config.logging))

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logging.getLogger("runtime"),
            app_config=app_config,
            ui_server=start_ui_server(app_config.ui_server, logger),
            hooks=RuntimeHooks(setup_signal_handlers=setup_signal_handlers),
        )
    )
    return engine.run()


if __name__ == "__main__":
    raise SystemExit(main())
