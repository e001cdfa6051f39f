#!/usr/bin/env python3
"""
Interactive local catalog browser (no HTTP).

Usage:
  python3 scripts/browse_local.py [--search acme] [--category Technology] [--city Austin] [--sort rating]

What it does:
- Loads the configured catalog (sample data or CATALOG_PATH JSON)
- Applies the given filters through the same CatalogSession the API uses
- Lets you keep refining the view with commands until /quit
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from service_directory.application.exceptions import CatalogLoadError, UnknownRecordError
from service_directory.application.use_cases.catalog_session import CatalogSession
from service_directory.application.utils.contact import feature_preview
from service_directory.domain.entities.sort_mode import SORT_MODE_LABELS
from service_directory.wiring.dependencies import get_catalog_source


def _print_view(session: CatalogSession) -> None:
    summary = session.summary()
    state = session.state
    print("-" * 60)
    print(f"{summary.headline}. {summary.description}")
    print(f"search={state.search_term!r} sort={state.sort_mode} favorites={len(session.favorites)}")
    print("-" * 60)
    for record in session.view:
        star = "*" if session.is_favorite(record.id) else " "
        preview = feature_preview(record)
        extra = f" +{preview.hidden_count}" if preview.hidden_count else ""
        print(
            f"{star} [{record.id}] {record.name} ({record.category}, {record.city}) "
            f"{record.rating} ({record.reviews} reviews) {record.price}"
        )
        if preview.shown:
            print(f"      {', '.join(preview.shown)}{extra}")


def _print_help() -> None:
    print("Commands:")
    print("  /search <text>    -> set search term (empty clears)")
    print("  /category <name>  -> filter by category ('All' clears)")
    print("  /city <name>      -> filter by city ('All' clears)")
    print(f"  /sort <mode>      -> one of {', '.join(SORT_MODE_LABELS)}")
    print("  /fav <id>         -> toggle favorite")
    print("  /open <id>        -> show details")
    print("  /reset            -> reset filters")
    print("  /facets           -> list categories and cities")
    print("  /quit             -> exit")


def _run_command(session: CatalogSession, line: str) -> bool:
    cmd, _, arg = line.partition(" ")
    cmd = cmd.lower()
    arg = arg.strip()

    if cmd in ("/quit", "/exit"):
        return False
    if cmd == "/help":
        _print_help()
        return True
    if cmd == "/facets":
        print("categories:", ", ".join(session.categories))
        print("cities:", ", ".join(session.cities))
        return True

    try:
        if cmd == "/search":
            session.set_search_term(arg)
        elif cmd == "/category":
            session.set_category(arg or "All")
        elif cmd == "/city":
            session.set_city(arg or "All")
        elif cmd == "/sort":
            session.set_sort_mode(arg)
        elif cmd == "/reset":
            session.reset_filters()
        elif cmd == "/fav":
            session.toggle_favorite(session.resolve_id(arg))
        elif cmd == "/open":
            session.select(session.resolve_id(arg))
            record = session.selected_record
            print(f"\n{record.name}: {record.tagline}")
            print(record.description)
            print(f"phone: {record.phone}  email: {record.email}")
            print(f"address: {record.address}")
            print(f"features: {', '.join(record.features)}")
            session.close()
            return True
        else:
            print("Unknown command, try /help")
            return True
    except UnknownRecordError as e:
        print(f"ERROR: {e}")
        return True

    _print_view(session)
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Browse the service catalog locally.")
    parser.add_argument("--search", default="")
    parser.add_argument("--category", default="All")
    parser.add_argument("--city", default="All")
    parser.add_argument("--sort", default="rating", help=f"one of {', '.join(SORT_MODE_LABELS)}")
    parser.add_argument("--once", action="store_true", help="print the view and exit")
    args = parser.parse_args()

    try:
        records = get_catalog_source().load_records()
    except CatalogLoadError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    session = CatalogSession(records, sort_mode=args.sort)
    session.set_search_term(args.search)
    session.set_category(args.category)
    session.set_city(args.city)
    _print_view(session)

    if args.once:
        return

    print("Type /help for commands.")
    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return
        if not line:
            continue
        if not _run_command(session, line):
            print("Bye!")
            return


if __name__ == "__main__":
    main()
