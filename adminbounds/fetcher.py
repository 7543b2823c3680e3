import os
import time
from typing import Iterable, List, Optional

import requests
from loguru import logger

from adminbounds.models import FetchSettings, LevelResult
from adminbounds.query import (
    ADMIN_LEVELS,
    build_query,
    encode_body,
    output_filename,
)
from adminbounds.utils import format_size, format_time


class OverpassFetcher:
    """
    Download administrative boundary relations from an Overpass endpoint.

    Each call to `fetch_level` sends one POST and writes the raw response
    body to `al<level>.geom.osm`. Nothing is retried or parsed; any
    requests/OS error is left to propagate to the caller.
    """

    def __init__(
        self,
        settings: Optional[FetchSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        self.settings = settings or FetchSettings()
        self.session = session or requests.Session()

    def fetch_level(self, level: int) -> LevelResult:
        query = build_query(level)
        body = encode_body(query)
        out_path = os.path.join(self.settings.out_dir, output_filename(level))

        logger.info(
            f"Overpass: Requesting admin_level={level} from {self.settings.endpoint}"
        )
        logger.debug(f"Overpass query for admin_level={level}:{query}")

        start = time.perf_counter()
        response = self.session.post(
            self.settings.endpoint,
            data=body,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "User-Agent": self.settings.user_agent,
            },
            timeout=self.settings.timeout,
        )
        # Raise before touching the output file so a failed level leaves it alone
        response.raise_for_status()
        if not 200 <= response.status_code < 300:
            raise requests.HTTPError(
                f"{response.status_code} Non-success status for url: {response.url}",
                response=response,
            )

        content = response.content
        with open(out_path, "wb") as f:
            f.write(content)
        elapsed = time.perf_counter() - start

        logger.success(
            f"Overpass: admin_level={level} saved to {out_path} "
            f"({format_size(len(content))} in {format_time(elapsed)})"
        )
        return LevelResult(
            level=level,
            path=out_path,
            size_bytes=len(content),
            status_code=response.status_code,
            elapsed_seconds=elapsed,
        )

    def close(self):
        self.session.close()


def fetch_levels(
    levels: Iterable[int] = ADMIN_LEVELS,
    settings: Optional[FetchSettings] = None,
    session: Optional[requests.Session] = None,
) -> List[LevelResult]:
    """
    Fetch each admin level in order, one after the other.

    The first failure propagates immediately; levels after it are never
    requested.
    """
    fetcher = OverpassFetcher(settings=settings, session=session)
    results = []
    try:
        for level in levels:
            results.append(fetcher.fetch_level(level))
    finally:
        # Only close sessions we created
        if session is None:
            fetcher.close()
    logger.info("Fetched {} admin level(s): {}", len(results), [r.level for r in results])
    return results
