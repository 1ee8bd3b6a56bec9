import logging
from dataclasses import dataclass, fields, replace, asdict
from typing import Optional

from .errors import ArgumentError
from .types import SortStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """process-wide knobs for enumly"""
    sort_strategy: Optional[SortStrategy] = None  # none -> quicksort
    log_deferred: bool = False  # debug-log creation and driving of lazy sequences


_current = Settings()


def get_settings() -> Settings:
    return _current


def configure(**changes) -> Settings:
    """
    replaces the current settings with the given fields changed.
    returns the previous settings so callers can put them back:

        previous = configure(sort_strategy=my_sort)
        ...
        configure(**asdict(previous))
    """
    global _current
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise ArgumentError(f"unknown setting(s): {', '.join(unknown)}")

    previous = _current
    _current = replace(_current, **changes)
    logger.debug(f"settings changed: {asdict(_current)}")
    return previous
