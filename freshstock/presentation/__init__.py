"""
Presentation layer: blueprints, request schemas and the JSON envelopes.
"""

from freshstock.presentation.routes import init_app as init_routes
from freshstock.presentation.web import register_error_handlers


def init_app(app):
    app.url_map.strict_slashes = False
    init_routes(app)
    register_error_handlers(app)
