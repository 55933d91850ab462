# mypy: disable-error-code="assignment"
from dependency_injector import containers, providers

from posts_gateway.application.settings import ApplicationSettings
from posts_gateway.core.usecase.create_post import CreatePostUseCase
from posts_gateway.core.usecase.list_posts import ListPostsUseCase
from posts_gateway.data.postgres.database import PostgresSettings, init_async_engine
from posts_gateway.data.postgres.repositories.posts import PostgresPostRepository
from posts_gateway.data.supabase.client import SupabaseSettings, init_http_client
from posts_gateway.data.supabase.posts import SupabasePostRepository


class Settings(containers.DeclarativeContainer):
    app = providers.Singleton(ApplicationSettings)
    supabase = providers.Singleton(SupabaseSettings)
    postgres = providers.Singleton(PostgresSettings)


class Database(containers.DeclarativeContainer):
    settings: Settings = providers.DependenciesContainer()

    http_client = providers.Singleton(init_http_client, settings=settings.supabase)
    engine = providers.Singleton(init_async_engine, settings=settings.postgres)


class Repositories(containers.DeclarativeContainer):
    settings: Settings = providers.DependenciesContainer()
    database: Database = providers.DependenciesContainer()

    posts = providers.Selector(
        settings.app.provided.storage_backend,
        supabase=providers.Singleton(
            SupabasePostRepository,
            client=database.http_client,
            table=settings.supabase.provided.table,
        ),
        postgres=providers.Singleton(PostgresPostRepository, db=database.engine),
    )


class UseCases(containers.DeclarativeContainer):
    repositories: Repositories = providers.DependenciesContainer()

    list_posts = providers.Factory(
        ListPostsUseCase,
        post_repository=repositories.posts,
    )
    create_post = providers.Factory(
        CreatePostUseCase,
        post_repository=repositories.posts,
    )


class Container(containers.DeclarativeContainer):
    settings: Settings = providers.Container(Settings)
    database: Database = providers.Container(Database, settings=settings)
    repositories: Repositories = providers.Container(
        Repositories, settings=settings, database=database
    )
    use_cases: UseCases = providers.Container(UseCases, repositories=repositories)


def init() -> Container:
    container = Container()
    container.check_dependencies()
    return container
