#!/usr/bin/env python3
"""
Administer the content cache and lead ledger.

Usage:
    python manage_cache.py publish                     # Rebuild content cache, clear gists
    python manage_cache.py status                      # Show cached languages
    python manage_cache.py seed content.json           # Load sections, keep existing rows
    python manage_cache.py seed content.json --overwrite
    python manage_cache.py leads                       # Print the lead ledger
    python manage_cache.py --clear-gists               # Drop all gists only

The seed file maps lang -> {section -> data}.
"""

import json
import sys
from pathlib import Path

from app.container import Container
from app.repositories import open_store
from settings import DB_PATH, LOG_LEVEL
from settings.logging import setup_logging

logger = setup_logging(level=LOG_LEVEL, to_file=True)


def run_publish(container: Container) -> None:
    result = container.publisher.publish()
    print(f"\nPublished {', '.join(result.rebuilt_languages)} at {result.published_at:%Y-%m-%d %H:%M:%S} UTC\n")


def run_status(container: Container) -> None:
    status = container.publisher.status()
    if not status:
        print("\n⚠️  Content cache is empty. Run 'python manage_cache.py publish'.\n")
        return

    print("\n" + "=" * 40)
    print("CONTENT CACHE")
    print("=" * 40)
    for lang in container.languages:
        updated = status.get(lang)
        mark = "✅" if updated else "❌"
        print(f"  {lang}: {mark} {updated or 'not cached'}")
    for lang in sorted(set(status) - set(container.languages)):
        print(f"  {lang}: (unsupported) {status[lang]}")
    stored = container.content_repo.languages()
    print(f"  content store: {', '.join(stored) or 'empty'}")
    print("=" * 40 + "\n")


def run_seed(container: Container, path: Path, overwrite: bool) -> None:
    data = json.loads(path.read_text(encoding="utf-8"))
    for lang, sections in data.items():
        if lang not in container.languages:
            logger.warning("Skipping unsupported lang {}", lang)
            continue
        container.content_repo.seed(lang, sections, overwrite=overwrite)
    logger.info("Seed complete. Run 'publish' to rebuild the cache.")


def run_leads(container: Container) -> None:
    leads = container.leads.list_leads()
    print(f"\n{len(leads)} leads")
    for lead in leads:
        extras = ", ".join(f"{k}={v}" for k, v in (("interest", lead.interest), ("name", lead.name)) if v)
        print(f"  #{lead.id} {lead.email} [{lead.source}] {extras}")
    print()


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    container = Container.from_settings(open_store(DB_PATH))
    try:
        if "--clear-gists" in args:
            container.gist_repo.clear()
        elif args[0] == "publish":
            run_publish(container)
        elif args[0] == "status":
            run_status(container)
        elif args[0] == "seed" and len(args) > 1:
            run_seed(container, Path(args[1]), overwrite="--overwrite" in args)
        elif args[0] == "leads":
            run_leads(container)
        else:
            print(__doc__)
            sys.exit(1)
    finally:
        container.store.close()


if __name__ == "__main__":
    main()
