from __future__ import annotations

import importlib
import importlib.util
import logging
from typing import Dict, Optional, Sequence

from .config import load_settings

log = logging.getLogger(__name__)

_LOADED: Dict[str, bool] = {}


def load_adapters(modules: Optional[Sequence[str]] = None) -> Dict[str, bool]:
    """Import adapter packages so their registrations take effect.

    A package that is missing or fails to import is reported and skipped; the
    remaining packages still load. Returns ``{package: loaded}``.
    """
    if modules is None:
        modules = load_settings().adapters
    status: Dict[str, bool] = {}
    for mod in modules:
        if _LOADED.get(mod):
            status[mod] = True
            continue
        if importlib.util.find_spec(mod) is None:
            log.warning("adapter package %s is not installed", mod)
            status[mod] = False
            continue
        try:
            importlib.import_module(mod)
        except Exception as exc:
            log.warning("adapter package %s failed to import: %s", mod, exc)
            status[mod] = False
        else:
            _LOADED[mod] = True
            status[mod] = True
    return status
