import httpx
from pydantic import AnyHttpUrl, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class SupabaseSettings(BaseSettings):
    url: AnyHttpUrl
    key: SecretStr
    table: str = "posts"
    timeout_s: int = 10

    model_config = SettingsConfigDict(env_prefix="SUPABASE_", env_file=".env", extra="ignore")


def init_http_client(
    settings: SupabaseSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build a client for the PostgREST interface of a Supabase project.

    The same key is sent as the api key and as the bearer token,
    which is how Supabase authorizes anonymous and service role keys alike.
    """
    key = settings.key.get_secret_value()
    return httpx.AsyncClient(
        base_url=f"{str(settings.url).rstrip('/')}/rest/v1",
        headers={
            "apikey": key,
            "Authorization": f"Bearer {key}",
        },
        timeout=settings.timeout_s,
        transport=transport,
    )
