"""Deployment lookups for the game server this process runs as.

Everything here is derived from settings and the request host; nothing is
cached or mutated.
"""
from typing import Iterable, Mapping

from app.core.config import settings

SERVERS = {
    "vendetta": {"old": "Old", "s1": "s1 mods", "test": "Test"},
}


def is_sub_domain() -> bool:
    return bool(settings.GAME_SERVER_NAME)


def get_sub_domain() -> str | None:
    return settings.GAME_SERVER_NAME if is_sub_domain() else None


def get_domain(host: str | None = None) -> str:
    host = (host or "localhost").replace("www.", "")
    if "." not in host:
        return host
    parts = host.split(".", 1)
    return parts[1] if is_sub_domain() else host


def get_game_type() -> str | None:
    return settings.GAME_TYPE or None


def get_game_name() -> str:
    words = (get_game_type() or "").split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words) + " Plus"


def get_servers() -> dict[str, str]:
    servers = dict(SERVERS.get(get_game_type(), {}))
    if get_sub_domain() == "test":
        servers.pop("test", None)
    return servers


def is_game_server() -> bool:
    return get_sub_domain() in get_servers()


def get_static_url(host: str | None = None) -> str:
    if settings.APP_ENV == "development":
        return "/static/"
    if get_sub_domain() == "test":
        return f"http://static.test.{get_domain(host)}/"
    return f"http://static.{get_domain(host)}/"


def is_cron(argv: Iterable[str] = (), query: Mapping[str, str] | None = None) -> bool:
    if query and "cron" in query:
        return True
    argv = list(argv)
    return len(argv) > 1 and argv[1] == "cron"
