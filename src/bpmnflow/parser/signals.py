"""Global signal definitions and signal reference resolution."""
import logging
from collections.abc import Mapping
from typing import Iterator, Optional

from ..config import Config
from .tags import iter_tagged

logger = logging.getLogger(__name__)


class SignalCatalog(Mapping):
    """Read-only mapping of signal id -> display name.

    Signals are declared at the definitions level, so the whole document is
    scanned, not only the process element.
    """

    def __init__(self, signals: Optional[dict[str, str]] = None):
        self._signals = dict(signals or {})

    @classmethod
    def build(cls, root) -> "SignalCatalog":
        signals = {}
        for element in iter_tagged(root, "signal"):
            signal_id = element.get("id", "")
            name = element.get("name", "")
            if not signal_id or not name:
                logger.debug("Skipping signal without id or name: id=%r name=%r", signal_id, name)
                continue
            signals[signal_id] = name
        logger.debug("Signal catalog built with %d entries", len(signals))
        return cls(signals)

    def resolve(self, signal_ref: str) -> str:
        """Display name for ``signal_ref``, or a placeholder naming the unknown ref."""
        name = self._signals.get(signal_ref)
        if name is None:
            logger.warning("Unresolved signal reference: %r", signal_ref)
            return Config.UNKNOWN_SIGNAL_TEMPLATE.format(ref=signal_ref)
        return name

    def as_dict(self) -> dict[str, str]:
        return dict(self._signals)

    def __getitem__(self, signal_id: str) -> str:
        return self._signals[signal_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._signals)

    def __len__(self) -> int:
        return len(self._signals)

    def __repr__(self) -> str:
        return f"SignalCatalog({self._signals!r})"
