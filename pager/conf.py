# PAG/pager/conf.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: значения по умолчанию для пагинатора + слияние с settings.PAGER
# ─────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
from typing import Any, Dict

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_LABELS: Dict[str, str] = {
    "first": "« First",
    "previous": "« Previous",
    "next": "Next »",
    "last": "Last »»",
}

DEFAULTS: Dict[str, Any] = {
    "ITEMS_PER_PAGE": 10,
    "CRUMBS": 5,
    "KEY": "page",
    "TARGET": "",
    "CLASSES": ["clearfix", "pagination"],
    "LABELS": DEFAULT_LABELS,
    "CLEAN": False,
    "ALWAYS_SHOW": False,
    "SCHEME": "http",
    "TEMPLATE": "pager/pagination.html",
}


def pager_settings() -> Dict[str, Any]:
    """Итоговые настройки: DEFAULTS + settings.PAGER.

    Читаем settings на каждом вызове (без кэша), чтобы переопределения
    в тестах через фикстуру ``settings`` сразу действовали.
    LABELS сливается по ключам: можно переопределить только "next".
    """
    user = getattr(settings, "PAGER", None) or {}
    merged = dict(DEFAULTS)
    merged["CLASSES"] = list(DEFAULTS["CLASSES"])
    merged["LABELS"] = dict(DEFAULT_LABELS)

    for key, value in user.items():
        if key not in DEFAULTS:
            logger.warning("Unknown PAGER setting ignored: %s", key)
            continue
        if key == "LABELS":
            merged["LABELS"].update(value or {})
        elif key == "CLASSES":
            merged["CLASSES"] = [value] if isinstance(value, str) else list(value)
        else:
            merged[key] = value
    return merged
