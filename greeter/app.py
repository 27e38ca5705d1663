import logging
import socket

from flask import Flask

from greeter.config import Config

LOGGER = logging.getLogger(__name__)

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


def create_app(config=None):
    app = Flask(__name__)
    app.config["GREETER"] = config if config is not None else Config()

    @app.route("/")
    def home():
        try:
            hostname = socket.gethostname()  # shows WHICH instance answered
        except OSError as exc:
            LOGGER.error("Failed to get hostname: %s", exc)
            return "Failed to get hostname", 500, TEXT_PLAIN
        if not hostname:
            LOGGER.error("Failed to get hostname: lookup returned an empty name")
            return "Failed to get hostname", 500, TEXT_PLAIN
        return f"Greetings from {hostname}\n", 200, TEXT_PLAIN

    @app.route("/health")
    def health():
        return "OK", 200, TEXT_PLAIN

    return app
