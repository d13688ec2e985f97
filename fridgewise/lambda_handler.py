import serverless_wsgi

from fridgewise import create_app
from fridgewise.config.settings import ProductionConfig

app = create_app(ProductionConfig)


def handler(event, context):
    return serverless_wsgi.handle_request(app, event, context)
