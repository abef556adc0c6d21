"""Re-publish the generated stylesheet whenever the registry changes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from tessera.session import BuildSession, get_session

logger = logging.getLogger("tessera")


class StylesheetPublisher:
    """Batch registry changes into stylesheet publishes.

    Each new registry entry only marks the publisher dirty; :meth:`flush`
    renders the CSS once and hands it to ``write`` if the text differs from
    the last published text. Hosts call ``flush`` at their own cadence (end
    of a request, end of a build, a timer).
    """

    def __init__(
        self,
        write: Callable[[str], None],
        session: BuildSession | None = None,
    ) -> None:
        self._write = write
        self._session = session or get_session()
        self._dirty = True
        self._last: str | None = None
        self._unsubscribe: Callable[[], None] | None = self._session.on_change(self._mark_dirty)

    def _mark_dirty(self) -> None:
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def published(self) -> str | None:
        """The last text passed to ``write``, or None before the first publish."""
        return self._last

    def flush(self) -> bool:
        """Publish the current stylesheet if it changed. Returns True if written."""
        if not self._dirty:
            return False
        self._dirty = False
        text = self._session.generate_css()
        if text == self._last:
            return False
        self._write(text)
        self._last = text
        logger.debug("published stylesheet (%d chars)", len(text))
        return True

    def close(self) -> None:
        """Stop listening for registry changes. Safe to call twice."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> StylesheetPublisher:
        return self

    def __exit__(self, *exc: object) -> None:
        self.flush()
        self.close()


class FilePublisher(StylesheetPublisher):
    """Publisher writing the stylesheet to *path*."""

    def __init__(self, path: str | Path, session: BuildSession | None = None) -> None:
        self.path = Path(path)
        super().__init__(self._write_file, session)

    def _write_file(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
