"""
Sinem's Amazing Web App - Flask Web Server

This module implements the web server using the Flask application factory
pattern. Every request, whatever its method, path, headers or body, is answered
with the same plaintext greeting. Connections are served by Werkzeug's
threaded WSGI server, one thread per connection.
"""

import logging
import signal
import socket

from flask import Flask, Response
from werkzeug.serving import BaseWSGIServer, make_server

from sinem_web.config import HOST, PORT

logger = logging.getLogger(__name__)

GREETING = "Welcome to Sinem's Amazing Web App!\n"
CONTENT_TYPE = "text/plain"

# OPTIONS is listed explicitly so Flask does not answer it on our behalf
HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


class WebServerError(Exception):
    """Raised when web server operations fail."""

    pass


class BindError(WebServerError):
    """Raised when the listener cannot be bound to its address."""

    pass


def greeting_response() -> Response:
    """Build the fixed 200 response sent for every request."""
    return Response(GREETING, status=200, content_type=CONTENT_TYPE)


def create_flask_app() -> Flask:
    """
    Create Flask application using factory pattern.

    Returns:
        Configured Flask application
    """
    app = Flask(__name__, static_folder=None)

    # Keep "//a" from being redirected to "/a"; it gets the greeting too
    app.url_map.merge_slashes = False

    register_routes(app)
    register_error_handlers(app)

    logger.debug("Flask web server initialized")
    return app


def register_routes(app: Flask) -> None:
    """
    Register the catch-all route.

    Args:
        app: Flask application instance
    """

    @app.route("/", defaults={"path": ""}, methods=HTTP_METHODS)
    @app.route("/<path:path>", methods=HTTP_METHODS)
    def welcome(path):
        """Answer any request with the greeting. The request is never inspected."""
        logger.info("request received")
        return greeting_response()


def register_error_handlers(app: Flask) -> None:
    """
    Register Flask error handlers.

    Requests the router cannot place still get the greeting.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(404)
    def not_found(error):
        logger.info("request received")
        return greeting_response()

    @app.errorhandler(405)
    def method_not_allowed(error):
        logger.info("request received")
        return greeting_response()

    @app.errorhandler(Exception)
    def handle_exception(e):
        """Handle all unhandled exceptions."""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        logger.info("request received")
        return greeting_response()


# =============================================================================
# LISTENER AND SERVE LOOP
# =============================================================================


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Bind a listening TCP socket.

    Args:
        host: Interface to bind, "0.0.0.0" for all IPv4 interfaces
        port: Port to bind, 0 for an ephemeral port

    Returns:
        A bound socket that is already listening

    Raises:
        BindError: If the address is in use, not permitted or invalid
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    try:
        return socket.create_server((host, port), family=family)
    except (OSError, OverflowError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise BindError(f"Could not bind to {host}:{port}: {reason}") from e


def create_server(flask_app: Flask, listener: socket.socket) -> BaseWSGIServer:
    """
    Wrap a bound listener in Werkzeug's threaded WSGI server.

    The server works on a duplicate of the listener's descriptor, so the
    listener itself is closed here.
    """
    host, port = listener.getsockname()[:2]
    try:
        server = make_server(host, port, flask_app, threaded=True, fd=listener.fileno())
    finally:
        listener.close()
    return server


def run(host: str = HOST, port: int = PORT) -> None:
    """
    Bind the listener and serve until the process is interrupted.

    Raises:
        BindError: If the listener cannot be bound
    """
    server = create_server(app, bind_listener(host, port))
    bound_port = server.server_address[1]

    logger.info(f"Server running at http://{host}:{bound_port}/")

    # Werkzeug stops the loop and closes the socket on KeyboardInterrupt
    server.serve_forever()
    logger.info("Server stopped")


def _handle_sigterm(signum, frame) -> None:
    raise KeyboardInterrupt


def main() -> int:
    """
    Process entry point.

    Returns:
        0 once the server stops, 1 if the listener could not be bound
    """
    signal.signal(signal.SIGTERM, _handle_sigterm)

    try:
        run(HOST, PORT)
    except BindError as e:
        logger.error(f"Failed to start web server: {e}")
        return 1
    return 0


# Create the Flask app for WSGI servers to import
app = create_flask_app()


if __name__ == "__main__":
    raise SystemExit(main())
