from __future__ import annotations

import time

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connections


class Command(BaseCommand):
    help = "Block until the default database accepts connections."

    def add_arguments(self, parser):
        parser.add_argument("--attempts", type=int, default=30)
        parser.add_argument("--delay", type=float, default=1.0)

    def handle(self, *args, **options):
        attempts: int = options["attempts"]
        delay: float = options["delay"]
        conn = connections["default"]

        for attempt in range(1, attempts + 1):
            try:
                conn.ensure_connection()
                with conn.cursor() as cursor:
                    cursor.execute("SELECT 1")
            except DatabaseError as exc:
                self.stdout.write(
                    f"Database unavailable (attempt {attempt}/{attempts}): {exc}"
                )
                conn.close()
                if attempt < attempts:
                    time.sleep(delay)
                continue

            self.stdout.write(self.style.SUCCESS("Database available."))
            return

        raise CommandError(f"Database still unavailable after {attempts} attempts.")
