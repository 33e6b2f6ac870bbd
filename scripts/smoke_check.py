#!/usr/bin/env python3
"""Exercise the read operations against a running movie service.

Reads MOVIES_BASE_URL (and the other MOVIES_* settings) from the
environment or .env, then lists movies and runs one search of each kind.

Usage:
    MOVIES_BASE_URL=http://localhost:8081 python scripts/smoke_check.py [name] [year]
"""

from __future__ import annotations

import sys

from movies_client import MovieClientError, MoviesRestClient, configure_logging


def main(argv: list[str]) -> int:
    configure_logging()
    name = argv[1] if len(argv) > 1 else "Avengers"
    year = int(argv[2]) if len(argv) > 2 else 2012

    with MoviesRestClient.from_settings() as client:
        try:
            movies = client.retrieve_all_movies()
            print(f"{len(movies)} movies available")
            print(f"{len(client.retrieve_movies_by_name(name))} movies matching {name!r}")
            print(f"{len(client.retrieve_movies_by_year(year))} movies from {year}")
        except MovieClientError as exc:
            print(f"Movie service check failed ({exc.kind.value}): {exc}")
            return 1
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
