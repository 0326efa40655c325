import argparse

import uvicorn

from greenlight.app import create_app
from greenlight.infrastructure.config.settings import Settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="greenlight movie API server")
    parser.add_argument("--port", type=int, default=None, help="API server port")
    parser.add_argument("--env", type=str, default=None, help="Current environment (dev|stage|prod)")
    parser.add_argument("--db-dsn", type=str, default=None, help="PostgreSQL DSN")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "PORT": args.port,
        "ENV": args.env,
        "DATABASE_URL": args.db_dsn,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv=None) -> None:
    settings = load_settings(parse_args(argv))
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
