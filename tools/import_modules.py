#!/usr/bin/env python3
"""
Module Import Tool - Bulk-create modules from a JSON file.

The file holds a list of {"nom": ..., "duree": ...} objects. Each entry is
validated with the same rules as the CLI; valid entries are created one by one
on the remote store.

Usage:
    python tools/import_modules.py --source data/modules.json
    python tools/import_modules.py --source data/modules.json --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from moduletrack.adapters.mockapi import MockAPIClient
from moduletrack.config import FetchError, ModuleValidationError, get_settings
from moduletrack.domains.modules import ModuleService, ModuleStore, validate_create

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def load_entries(source: Path) -> list[dict[str, Any]]:
    """
    Read module entries from a JSON file.

    Args:
        source: Path to a JSON array of objects

    Returns:
        Entries, or an empty list if the file is unusable
    """
    if not source.exists():
        logger.error("Source not found: %s", source)
        return []

    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", source, e)
        return []

    if not isinstance(data, list):
        logger.error("Expected a JSON array in %s", source)
        return []

    return [entry for entry in data if isinstance(entry, dict)]


async def import_modules(
    entries: list[dict[str, Any]],
    service: ModuleService,
    dry_run: bool = False,
) -> dict[str, int]:
    """
    Validate and create each entry.

    Returns:
        Counts of created, invalid and failed entries
    """
    counts = {"created": 0, "invalid": 0, "failed": 0}

    for index, entry in enumerate(entries):
        nom, duree = entry.get("nom"), entry.get("duree")
        nom = str(nom) if nom is not None else ""

        if dry_run:
            errors = validate_create(nom, duree)
            if errors:
                logger.warning("Entry %d invalid: %s", index, errors)
                counts["invalid"] += 1
            else:
                counts["created"] += 1
            continue

        try:
            module = await service.create(nom, duree)
        except ModuleValidationError as e:
            logger.warning("Entry %d invalid: %s", index, e.errors)
            counts["invalid"] += 1
        except FetchError as e:
            logger.error("Entry %d failed: %s", index, e.message)
            counts["failed"] += 1
        else:
            logger.info("Created %s: %s (%sh)", module.id, module.nom, module.duree)
            counts["created"] += 1

    return counts


async def run(source: Path, api_url: str | None, dry_run: bool) -> int:
    """Import the file and return a process exit code."""
    entries = load_entries(source)
    if not entries:
        return 1

    settings = get_settings()
    async with MockAPIClient(
        base_url=api_url or settings.modules_api_url,
        timeout=settings.modules_api_timeout,
    ) as client:
        counts = await import_modules(entries, ModuleService(client, ModuleStore()), dry_run)

    label = "Would create" if dry_run else "Created"
    logger.info(
        "%s %d modules (%d invalid, %d failed)",
        label,
        counts["created"],
        counts["invalid"],
        counts["failed"],
    )
    return 1 if counts["failed"] else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Import modules from a JSON file")
    parser.add_argument("--source", type=Path, required=True, help="JSON file to import")
    parser.add_argument("--api-url", help="Modules API base URL")
    parser.add_argument("--dry-run", action="store_true", help="Validate only")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.source, args.api_url, args.dry_run)))


if __name__ == "__main__":
    main()
