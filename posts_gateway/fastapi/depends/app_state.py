from starlette.requests import Request
from structlog.stdlib import BoundLogger

from posts_gateway.application.di import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_logger(request: Request) -> BoundLogger:
    return request.app.state.logger.bind(method=request.method, path=request.url.path)
