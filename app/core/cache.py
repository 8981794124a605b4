import logging
from typing import List

from starlette.responses import Response

logger = logging.getLogger(__name__)

REVALIDATED_HEADER = "X-Revalidated-Paths"


def no_store(response: Response) -> Response:
    """Mark a rendered page as never reusable, so every view reads the store."""
    response.headers["Cache-Control"] = "no-store"
    return response


class Revalidation:
    """Paths made stale by the mutations of a single request.

    One instance is created per request. Nothing rendered is kept in process,
    so a write made by another worker is visible on the next page load.
    """

    def __init__(self):
        self.paths: List[str] = []

    def revalidate_path(self, path: str) -> None:
        if path not in self.paths:
            self.paths.append(path)
        logger.info(f"Revalidated {path}")

    def apply(self, response: Response) -> Response:
        """Announce the stale paths on the response that follows the mutation."""
        if self.paths:
            response.headers[REVALIDATED_HEADER] = ", ".join(self.paths)
        return no_store(response)
