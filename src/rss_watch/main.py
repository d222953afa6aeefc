from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import httpx
import typer

from rss_watch import __version__
from rss_watch.config import DEFAULT_REFRESH_INTERVAL, ConfigError, WatcherConfig, load_config
from rss_watch.core import FeedWatcher, WatcherScheduler
from rss_watch.delivery import DeliveryEngine, SubprocessRunner
from rss_watch.errors import WatcherError
from rss_watch.feed import EntryDiffer, HttpFetcher
from rss_watch.feed.http_fetcher import HTTPHeader
from rss_watch.observability import configure_logging, get_logger
from rss_watch.storage import Database, DeliveryRepository, FeedRepository

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Scriptable RSS/Atom feed watching tool.")

_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ApplicationComponents:
    config: WatcherConfig
    db: Database
    client: httpx.AsyncClient
    watcher: FeedWatcher
    scheduler: WatcherScheduler


@asynccontextmanager
async def create_application(config: WatcherConfig) -> AsyncIterator[ApplicationComponents]:
    db = Database(config.database_path)
    db.initialize()

    feed_repo = FeedRepository(db)
    delivery_repo = DeliveryRepository(db)

    client = httpx.AsyncClient(
        timeout=httpx.Timeout(_HTTP_TIMEOUT_SECONDS),
        follow_redirects=True,
        headers={HTTPHeader.USER_AGENT: f"rss-watch/{__version__}"},
    )
    engine = DeliveryEngine(
        deliveries=delivery_repo,
        runner=SubprocessRunner(),
        scripts=config.scripts,
        import_only=config.import_only,
    )
    watcher = FeedWatcher(
        feed_url=config.feed_url,
        fetcher=HttpFetcher(client),
        feeds=feed_repo,
        differ=EntryDiffer(delivery_repo),
        engine=engine,
    )
    scheduler = WatcherScheduler(interval_seconds=config.interval_seconds, watcher=watcher)

    try:
        yield ApplicationComponents(
            config=config,
            db=db,
            client=client,
            watcher=watcher,
            scheduler=scheduler,
        )
    finally:
        await client.aclose()
        db.close()


@app.command()
def run(
    url: Annotated[str, typer.Argument(help="RSS or Atom feed URL.")],
    scripts: Annotated[
        list[Path] | None,
        typer.Argument(help="Programs to execute for each new entry, in order."),
    ] = None,
    refresh_interval: Annotated[
        str,
        typer.Option("--refresh-interval", "-r", envvar="REFRESH_INTERVAL", help="Feed refresh interval, e.g. 60s or 1h."),
    ] = DEFAULT_REFRESH_INTERVAL,
    database_path: Annotated[
        Path | None,
        typer.Option("--database-path", "-d", envvar="DATABASE_PATH", help="Path to the database file."),
    ] = None,
    import_only: Annotated[
        bool,
        typer.Option("--import-only", help="Record current entries as delivered without running scripts, then exit."),
    ] = False,
) -> None:
    configure_logging()
    try:
        config = load_config(
            feed_url=url,
            scripts=scripts or (),
            refresh_interval=refresh_interval,
            database_path=database_path,
            import_only=import_only,
        )
    except ConfigError as exc:
        logger.error("invalid_configuration", error=str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug("configuration_loaded", feed_url=config.feed_url, interval_seconds=config.interval_seconds)
    try:
        if config.import_only:
            asyncio.run(_run_import(config))
        else:
            asyncio.run(_run_watcher(config))
    except WatcherError as exc:
        logger.error("watcher_failed", error=str(exc), error_type=type(exc).__name__)
        raise typer.Exit(code=1) from exc


async def _run_import(config: WatcherConfig) -> None:
    async with create_application(config) as app_state:
        probe = await app_state.watcher.probe()
        await app_state.watcher.process(probe.feed)


async def _run_watcher(config: WatcherConfig) -> None:
    async with create_application(config) as app_state:
        await app_state.watcher.probe()
        await app_state.scheduler.start()
        logger.info("scheduler_started", feed_url=config.feed_url, interval_seconds=config.interval_seconds)
        try:
            await app_state.scheduler.join()
        finally:
            await app_state.scheduler.shutdown()


if __name__ == "__main__":
    app()
