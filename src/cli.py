# src/cli.py
from __future__ import annotations

import os
import sys
import json
import logging
import argparse
import traceback

# Ensure our package is importable regardless of CWD
sys.path.insert(0, os.path.dirname(__file__))

# ---------------------------
# Commands
# ---------------------------

def cmd_serve(port: int, host: str, debug: bool):
    from eventhub import create_app
    app = create_app()
    app.run(host=host, port=port, debug=debug)


def cmd_db_ping(store=None) -> None:
    from eventhub.db.mongo import MongoStore
    store = store or MongoStore.from_config()
    ok = store.ping()
    print("mongo ping:", "ok" if ok else "failed")
    if not ok:
        raise SystemExit(2)


def cmd_db_init(store=None) -> None:
    from eventhub.db.mongo import MongoStore
    store = store or MongoStore.from_config()
    store.ensure_indexes()
    print(f"indexes ensured on {store.db_name}")


def cmd_events_list(store=None) -> None:
    from eventhub.db.mongo import MongoStore
    from eventhub.models.events import list_events, serialize_event
    store = store or MongoStore.from_config()
    events = [serialize_event(ev) for ev in list_events(store.db)]
    print(json.dumps({"ok": True, "count": len(events), "events": events}, indent=2))


def cmd_events_seed(store=None) -> int:
    """
    Insert the sample catalogue; events whose slug is already taken are skipped.
    """
    from eventhub.data.sample_events import SAMPLE_EVENTS
    from eventhub.db.mongo import MongoStore
    from eventhub.errors import DuplicateSlugError
    from eventhub.models.events import create_event

    store = store or MongoStore.from_config()
    store.ensure_indexes()
    inserted = 0
    for sample in SAMPLE_EVENTS:
        try:
            ev = create_event(store.db, sample)
        except DuplicateSlugError as e:
            print(f"skip: {e.slug} already exists")
            continue
        print(f"inserted: {ev['slug']}")
        inserted += 1
    print(f"Seeded {inserted} events")
    return inserted


# ---------------------------
# Parser / main
# ---------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="EventHub CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # serve
    sp = sub.add_parser("serve", help="Run Flask server")
    sp.add_argument("--port", type=int, default=int(os.getenv("PORT", "8080")))
    sp.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    sp.add_argument("--debug", action="store_true")
    sp.set_defaults(func=lambda a: cmd_serve(a.port, a.host, a.debug))

    # db
    sc = sub.add_parser("db", help="Database utilities")
    sc_sub = sc.add_subparsers(dest="dbcmd", required=True)
    scp = sc_sub.add_parser("ping", help="Ping MongoDB")
    scp.set_defaults(func=lambda a: cmd_db_ping())
    sci = sc_sub.add_parser("init", help="Create collection indexes")
    sci.set_defaults(func=lambda a: cmd_db_init())

    # events
    ev = sub.add_parser("events", help="Event catalogue utilities")
    ev_sub = ev.add_subparsers(dest="evcmd", required=True)
    evl = ev_sub.add_parser("list", help="Print stored events, newest first")
    evl.set_defaults(func=lambda a: cmd_events_list())
    evs = ev_sub.add_parser("seed", help="Insert the sample conference catalogue")
    evs.set_defaults(func=lambda a: cmd_events_seed())

    return p


def main(argv=None):
    from eventhub import config
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except SystemExit:
        raise
    except Exception as e:
        # Surface trace on CLI errors
        print("ERROR:", e)
        traceback.print_exc()
        raise SystemExit(1)


if __name__ == "__main__":
    main()
