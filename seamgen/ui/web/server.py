"""
Web server — Flask app factory for the generation API.

Exposes ``codegen.process`` and ``validate_contracts`` as JSON
endpoints under /api/.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from seamgen.core.context import GeneratorContext

logger = logging.getLogger(__name__)


def create_app(
    context: GeneratorContext | None = None,
    project_root: Path | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        context: Generator context. Built with defaults for
            ``project_root`` (or the cwd) when omitted.
        project_root: Root used for the default context.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    context = context or GeneratorContext.default(project_root)
    app.config["GENERATOR_CONTEXT"] = context
    app.config["PROJECT_ROOT"] = str(context.root)
    app.config["MAX_CONTENT_LENGTH"] = 5 * 1024 * 1024  # contracts are small

    from seamgen.ui.web.routes_api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info("Generation API created (root=%s)", context.root)
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 3333,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting generation API on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
