import argparse
import asyncio

from greenlight.infrastructure.config.settings import Settings
from greenlight.infrastructure.persistence.database import create_engine
from greenlight.infrastructure.persistence.models import table_registry


async def create_tables(settings: Settings, drop: bool) -> None:
    engine = create_engine(settings)
    try:
        async with engine.begin() as conn:
            if drop:
                await conn.run_sync(table_registry.metadata.drop_all)
            await conn.run_sync(table_registry.metadata.create_all)
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--db-dsn", type=str, default=None)
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()

    settings = Settings(DATABASE_URL=args.db_dsn) if args.db_dsn else Settings()
    asyncio.run(create_tables(settings, args.drop))
    print("movies table ready")


if __name__ == "__main__":
    main()
