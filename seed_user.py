# seed_user.py
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from bson.objectid import ObjectId

from mongo_store import PortfolioStore, _encode_doc
from settings import DB_NAME, configure_logging, load_settings
from telemetry import MetricsCollector
from user_models import UserRecord

logger = logging.getLogger("seed")


@dataclass(frozen=True)
class SeedResult:
    created: bool
    user_id: ObjectId


async def seed_default_user(
    store: PortfolioStore, metrics: Optional[MetricsCollector] = None
) -> SeedResult:
    """
    Create the placeholder user document unless one is already there.

    Check and insert are separate round trips; two concurrent runs can both
    insert. Driver errors propagate and skip the final status line.
    """
    existing = await store.find_any_user()

    if not existing:
        print("Creating initial user document...")

        record = UserRecord.new_default()
        user_id = await store.insert_user(record)
        logger.info("Inserted default user %s", user_id)
        logger.debug("Inserted document: %s", _encode_doc(record.to_document()))

        print("User document created successfully!")
        result = SeedResult(created=True, user_id=user_id)
    else:
        logger.info("User %s already present, nothing to seed", existing.get("_id"))
        print("User document already exists.")
        result = SeedResult(created=False, user_id=existing.get("_id"))

    if metrics is not None and metrics.initialized:
        metrics.add_seed_outcome("created" if result.created else "exists", DB_NAME)

    print("Database initialized!")
    return result


async def main() -> SeedResult:
    settings = load_settings()
    configure_logging(settings.log_level)

    metrics = MetricsCollector.get_instance()
    if settings.otel_metrics_endpoint:
        metrics.init_metrics(otel_collector_url=settings.otel_metrics_endpoint)

    store = PortfolioStore(uri=settings.mongodb_uri, db_name=settings.db_name)
    try:
        return await seed_default_user(store, metrics)
    finally:
        await store.close()
        metrics.shutdown()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
