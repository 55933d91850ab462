from collections.abc import Iterator
from unittest import mock

import pytest

from posts_gateway.application.di import Container
from posts_gateway.core.repository.post import PostRepository


@pytest.fixture()
def post_repository(container: Container) -> Iterator[mock.Mock]:
    repo_mock = mock.Mock(spec=PostRepository)

    with container.repositories.posts.override(repo_mock):
        yield repo_mock
