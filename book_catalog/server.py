"""
GraphQL over HTTP using Flask and graphql-server
"""

from flask import Flask
from graphql_server.flask import GraphQLView
from werkzeug.serving import make_server

from book_catalog.logging import get_logger
from book_catalog.schema import schema

logger = get_logger(__name__)

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 4000
GRAPHQL_PATH = '/graphql'


def format_error(error):
    """Serialize a GraphQL error, logging it on the way out."""
    logger.warning("GraphQL request failed", error=error.message, path=error.path)
    return error.formatted


def create_app(config=None):
    """Create the Flask application serving the book schema.

    GraphiQL is served to browsers asking for HTML; everything else gets JSON.
    """
    app = Flask(__name__)
    app.config.update(GRAPHQL_PATH=GRAPHQL_PATH, GRAPHIQL=True)
    if config:
        app.config.update(config)

    view = GraphQLView.as_view(
        'graphql',
        schema=schema.graphql_schema,
        graphiql=app.config['GRAPHIQL'],
        format_error=format_error,
    )
    app.add_url_rule(app.config['GRAPHQL_PATH'], view_func=view)
    if app.config['GRAPHQL_PATH'] != '/':
        app.add_url_rule('/', endpoint='root', view_func=view)
    return app


def serve(host=DEFAULT_HOST, port=DEFAULT_PORT, app=None):
    """Bind the listener, log its URL and serve until interrupted."""
    app = app or create_app()
    server = make_server(host, port, app, threaded=True)
    url = f'http://{host}:{server.server_port}/'
    logger.info("Server ready", url=url)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Server stopped", url=url)
    finally:
        server.server_close()
