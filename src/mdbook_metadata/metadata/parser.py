"""Parse the interior of a metadata block into key/value pairs."""

from __future__ import annotations

import logging

from mdbook_metadata.contracts.document import ErrorPolicy
from mdbook_metadata.contracts.exceptions import ImproperlyFormattedLineError

logger = logging.getLogger(__name__)


def split_line(line: str) -> tuple[str, str] | None:
    """Split a ``key: value`` line at its first colon.

    Returns *None* when the line has no colon, an empty key, or nothing at all
    after the colon. Values may contain further colons; a whitespace-only
    value strips to an empty string.
    """
    if ":" not in line:
        return None
    key, value = line.split(":", 1)
    key = key.strip()
    if not key or not value:
        return None
    return key, value.strip()


class LineParser:
    """Turn metadata block text into a mapping under an :class:`ErrorPolicy`."""

    def __init__(self, policy: ErrorPolicy = ErrorPolicy.TOLERANT) -> None:
        self._policy = policy

    @property
    def policy(self) -> ErrorPolicy:
        return self._policy

    def parse(self, block: str | None) -> dict[str, str]:
        """Parse *block* line by line.

        Blank lines are ignored and later keys overwrite earlier ones.

        Raises:
            ImproperlyFormattedLineError: A line has no ``key: value`` shape and
                the policy is :attr:`ErrorPolicy.STRICT`.
        """
        metadata: dict[str, str] = {}
        if not block:
            return metadata

        # Only "\n" ends a line; other Unicode line breaks stay inside values.
        for raw_line in block.split("\n"):
            line = raw_line.removesuffix("\r")
            if not line.strip():
                continue
            pair = split_line(line)
            if pair is None:
                if self._policy is ErrorPolicy.STRICT:
                    raise ImproperlyFormattedLineError(line)
                logger.warning("Improperly formatted metadata line skipped: '%s'", line)
                continue
            key, value = pair
            logger.debug("Parsed metadata: %s: %s", key, value)
            metadata[key] = value

        return metadata
