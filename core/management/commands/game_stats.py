"""Print derived statistics for a JSON file of finished games."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from analysis.records import MalformedRecordError
from core.services import snapshot_payload, summarize_raw_records

SECTIONS = {
    "players": "previousPlayers",
    "leaderboard": "leaderboard",
    "facts": "generalFacts",
    "holders": "specialCardHolders",
    "months": "gamesByMonth",
}


class Command(BaseCommand):
    """Compute leaderboard, facts, card holders and monthly counts."""

    help = "Read a JSON array of game records (path or '-' for stdin) and print derived statistics as JSON."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("path", help="Path to a JSON file of game records, or '-' to read stdin.")
        parser.add_argument(
            "--section",
            choices=sorted(SECTIONS),
            default=None,
            help="Only print one section of the statistics.",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation (default: 2).",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        path: str = options["path"]
        section: str | None = options["section"]
        indent: int = options["indent"]

        try:
            raw_text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise CommandError(f"Unable to read {path}: {exc}") from exc

        try:
            payloads = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise CommandError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(payloads, list):
            raise CommandError("Expected a JSON array of game records.")

        try:
            snapshot = summarize_raw_records(payloads)
        except MalformedRecordError as exc:
            raise CommandError(str(exc)) from exc

        payload = snapshot_payload(snapshot)
        if section is not None:
            payload = payload[SECTIONS[section]]

        self.stdout.write(json.dumps(payload, indent=indent, ensure_ascii=False))
        return None
