# appseed/cli.py
import argparse
import os
import sys
from appseed.errors import StorageError
from appseed.logger import get_logger
from appseed.seed import seed, load_payload
from appseed.storage import load_storage_provider


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="appseed", description="Upsert an application record into the registry store.")
    p.add_argument("--payload", help="JSON record document (defaults to the bundled lhty2 app)")
    p.add_argument("--provider", choices=["sqlite", "memory"],
                   help="storage provider (env APPSEED_STORAGE_PROVIDER, default sqlite)")
    p.add_argument("--db", dest="sqlite_path", help="sqlite database path (env APPSEED_DB_PATH)")
    p.add_argument("--log-level", default=os.getenv("APPSEED_LOG_LEVEL", "INFO"),
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log = get_logger("appseed", level=args.log_level)

    store = None
    try:
        payload = load_payload(args.payload) if args.payload else None
        store = load_storage_provider({"provider": args.provider, "sqlite_path": args.sqlite_path})
        rec = seed(store, payload)
    except (StorageError, ValueError) as e:
        log.error(f"[SEED] failed: {e}")
        return 1
    finally:
        if store is not None:
            store.close()

    log.info(f"[SEED] app {rec.id} written")
    return 0


if __name__ == "__main__":
    sys.exit(main())
