# PAG/pager/services/pagination.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from django.db import models

from ..conf import pager_settings
from ..exceptions import (
    ConfigError,
    MissingCurrentPage,
    MissingTotal,
    PageAboveRange,
    PageBelowRange,
)
from .urls import URLBuilder

logger = logging.getLogger(__name__)


class LinkKind(models.TextChoices):
    FIRST = "first", "First"
    PREVIOUS = "previous", "Previous"
    PAGE_NUMBER = "page_number", "Page number"
    CURRENT = "current", "Current"
    NEXT = "next", "Next"
    LAST = "last", "Last"


class DisplayMode(models.TextChoices):
    FULL = "full", "Full (page numbers)"
    CLEAN = "clean", "Clean (previous/next only)"


@dataclass(frozen=True)
class CrumbWindow:
    """Сколько номеров показать слева/справа от текущей страницы."""
    leading: int
    trailing: int
    max_crumbs: int  # эффективный бюджет: min(страниц, crumbs)


@dataclass(frozen=True)
class LinkDescriptor:
    """Одна ссылка пагинации. Разметку из неё делает RenderAdapter."""
    kind: LinkKind
    href: str
    label: str
    page_number: Optional[int] = None
    css_classes: Tuple[str, ...] = ()
    disabled: bool = False

    @property
    def is_crumb(self) -> bool:
        return self.kind in (LinkKind.PAGE_NUMBER, LinkKind.CURRENT)


def page_count(total: int, items_per_page: int) -> int:
    """ceil(total / items_per_page), для пустого списка: 0."""
    if total <= 0:
        return 0
    return (total + items_per_page - 1) // items_per_page


def compute_crumb_window(current: int, pages: int, max_crumbs: int) -> CrumbWindow:
    """Окно «крошек» вокруг текущей страницы.

    Ширина окна постоянна (min(pages, max_crumbs)); у краёв диапазона
    недостающие слева/справа номера переносятся на другую сторону.
    Порядок проверок важен: сначала начало диапазона, потом конец.
    """
    budget = min(pages, max_crumbs)
    half = budget // 2
    leading = half

    # текущая страница среди первых half: слева меньше номеров
    for x in range(half):
        if current == x + 1:
            leading = x
            break

    # текущая среди последних half: слева забираем то, что не влезло справа
    for x in range(pages - half, pages):
        if current == x + 1:
            leading = budget - (pages - x)
            break

    trailing = max(budget - leading - 1, 0)
    logger.debug("Crumb window for %s/%s (max %s): leading=%s trailing=%s",
                 current, pages, max_crumbs, leading, trailing)
    return CrumbWindow(leading=leading, trailing=trailing, max_crumbs=budget)


def crumb_numbers(current: int, total: int, window_size: int = 5) -> List[int]:
    """Возвращает номера страниц окна вокруг текущей (включая её саму).

    Parameters
    ----------
    current : int
        Текущий номер страницы (1-based).
    total : int
        Общее число страниц.
    window_size : int, optional
        Максимум номеров, по умолчанию 5.

    Returns
    -------
    List[int]
        Список номеров страниц для пагинации.
    """
    if total <= 0:
        return []
    window = compute_crumb_window(current, total, window_size)
    leading = [current + x - window.leading for x in range(window.leading)]
    trailing = [current + x + 1 for x in range(window.trailing)]
    return leading + [current] + trailing


class PaginationState:
    """Состояние пагинации: конфигурация + вычисление списка ссылок.

    Конфигурация задаётся в конструкторе и цепочкой сеттеров
    (каждый возвращает self)::

        state = PaginationState(current=3, total=200).set_crumbs(7).set_key("p")
        links = state.build_links()

    Производные значения (число страниц, окно крошек) кэшируются до
    следующего вызова любого сеттера. Экземпляр не потокобезопасен:
    на каждый запрос создаём новый.
    """

    # опция конструктора -> имя сеттера (остальные: "set_" + имя)
    OPTION_ALIASES = {
        "max_crumbs": "set_crumbs",
        "always_show_pagination": "set_always_show",
    }

    def __init__(self, current: Optional[int] = 1, total: Optional[int] = None,
                 items_per_page: Optional[int] = None, **options: Any):
        conf = pager_settings()
        self._cache: Dict[str, Any] = {}
        self._current: Optional[int] = None
        self._total: Optional[int] = None
        self._path = ""
        self._query: Any = None

        self.set_current(current)
        if total is not None:
            self.set_total(total)
        self.set_items_per_page(items_per_page if items_per_page is not None else conf["ITEMS_PER_PAGE"])
        self.set_crumbs(conf["CRUMBS"])
        self.set_key(conf["KEY"])
        self.set_target(conf["TARGET"])
        self.set_classes(conf["CLASSES"])
        self._labels: Dict[str, str] = dict(conf["LABELS"])
        self.set_clean(conf["CLEAN"])
        self.set_always_show(conf["ALWAYS_SHOW"])
        self._scheme = conf["SCHEME"]

        for name, value in options.items():
            setter = getattr(self, self.OPTION_ALIASES.get(name, f"set_{name}"), None)
            if setter is None:
                raise TypeError(f"Unknown pagination option: {name}")
            setter(value)

    def __repr__(self) -> str:
        return (f"<PaginationState current={self._current} total={self._total} "
                f"per={self._items_per_page} crumbs={self._crumbs} mode={self._mode}>")

    # ── сеттеры ─────────────────────────────────────────────────────────────

    def _invalidate(self) -> None:
        self._cache.clear()

    def set_current(self, page: Optional[int]) -> "PaginationState":
        # диапазон не проверяем: это делает build_links()
        self._current = None if page is None else int(page)
        self._invalidate()
        return self

    def set_total(self, total: Optional[int]) -> "PaginationState":
        self._total = None if total is None else int(total)
        self._invalidate()
        return self

    def set_items_per_page(self, n: int) -> "PaginationState":
        n = int(n)
        if n < 1:
            raise ConfigError(f"items_per_page must be positive (got {n}).")
        self._items_per_page = n
        self._invalidate()
        return self

    def set_crumbs(self, crumbs: int) -> "PaginationState":
        crumbs = int(crumbs)
        if crumbs < 1:
            raise ConfigError(f"crumbs must be positive (got {crumbs}).")
        self._crumbs = crumbs
        self._invalidate()
        return self

    def set_key(self, key: str) -> "PaginationState":
        self._key = key
        self._invalidate()
        return self

    def set_target(self, target: str) -> "PaginationState":
        self._target = target or ""
        self._invalidate()
        return self

    def set_path(self, path: str, query: Any = None) -> "PaginationState":
        """Путь (и query) текущего запроса: нужны, когда target не задан."""
        self._path = path or ""
        self._query = query
        self._invalidate()
        return self

    def set_query(self, query: Any) -> "PaginationState":
        return self.set_path(self._path, query)

    def set_classes(self, classes: Union[str, Iterable[str]]) -> "PaginationState":
        self._classes: List[str] = []
        return self.add_classes(classes)

    def add_classes(self, classes: Union[str, Iterable[str]]) -> "PaginationState":
        """Полезно для Bootstrap (pagination-centered и т.п.)."""
        if isinstance(classes, str):
            classes = [classes]
        for name in classes:
            if name not in self._classes:
                self._classes.append(name)
        return self

    def _set_label(self, name: str, text: str) -> "PaginationState":
        self._labels[name] = text
        return self

    def set_first(self, text: str) -> "PaginationState":
        return self._set_label("first", text)

    def set_previous(self, text: str) -> "PaginationState":
        return self._set_label("previous", text)

    def set_next(self, text: str) -> "PaginationState":
        return self._set_label("next", text)

    def set_last(self, text: str) -> "PaginationState":
        return self._set_label("last", text)

    def set_display_mode(self, mode: Union[DisplayMode, str]) -> "PaginationState":
        self._mode = DisplayMode(mode)
        return self

    def set_clean(self, clean: bool = True) -> "PaginationState":
        """Только назад/вперёд, без номеров страниц. Обратное: set_full()."""
        return self.set_display_mode(DisplayMode.CLEAN if clean else DisplayMode.FULL)

    def set_full(self) -> "PaginationState":
        return self.set_clean(False)

    def set_always_show(self, flag: bool = True) -> "PaginationState":
        """Показывать блок даже если листать некуда (страниц <= 1)."""
        self._always_show = bool(flag)
        return self

    always_show_pagination = set_always_show

    def set_scheme(self, scheme: str) -> "PaginationState":
        self._scheme = scheme
        return self

    # ── чтение конфигурации ─────────────────────────────────────────────────

    @property
    def current(self) -> Optional[int]:
        return self._current

    @property
    def total(self) -> Optional[int]:
        return self._total

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @property
    def crumbs(self) -> int:
        return self._crumbs

    @property
    def key(self) -> str:
        return self._key

    @property
    def target(self) -> str:
        return self._target

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self._classes)

    @property
    def labels(self) -> Dict[str, str]:
        return dict(self._labels)

    @property
    def display_mode(self) -> DisplayMode:
        return self._mode

    @property
    def is_clean(self) -> bool:
        return self._mode == DisplayMode.CLEAN

    @property
    def always_show(self) -> bool:
        return self._always_show

    # ── вычисления ──────────────────────────────────────────────────────────

    def _memo(self, name: str, compute: Callable[[], Any]) -> Any:
        if name not in self._cache:
            self._cache[name] = compute()
        return self._cache[name]

    def validate(self) -> None:
        if self._current is None:
            logger.warning("Pagination rendered without current page")
            raise MissingCurrentPage()
        if self._total is None:
            logger.warning("Pagination rendered without total")
            raise MissingTotal()

    def page_count(self) -> int:
        if self._total is None:
            raise MissingTotal()
        return self._memo("page_count", lambda: page_count(self._total, self._items_per_page))

    def compute_crumb_window(self) -> CrumbWindow:
        self.validate()
        return self._memo("crumb_window",
                          lambda: compute_crumb_window(self._current, self.page_count(), self._crumbs))

    def crumb_numbers(self) -> List[int]:
        self.validate()
        return crumb_numbers(self._current, self.page_count(), self._crumbs)

    def url_builder(self) -> URLBuilder:
        return self._memo("url_builder",
                          lambda: URLBuilder(self._target, self._key, self._path, self._query))

    def render_url(self, page: int) -> str:
        return self.url_builder().build(page)

    def page_param(self, page: Optional[int] = None) -> str:
        return self.url_builder().page_param(self._current if page is None else page)

    def check_range(self) -> int:
        """Проверяет текущую страницу, возвращает число страниц."""
        self.validate()
        pages = self.page_count()
        if self._current < 1:
            logger.warning("Page %s below range (pages=%s)", self._current, pages)
            raise PageBelowRange(self._current, pages)
        # у пустого списка всё равно есть страница 1
        if self._current > max(pages, 1):
            logger.warning("Page %s above range (pages=%s)", self._current, pages)
            raise PageAboveRange(self._current, pages)
        return pages

    def build_links(self) -> List[LinkDescriptor]:
        """Упорядоченный список ссылок: First, Previous, [крошки], Next, Last."""
        pages = self.check_range()
        if pages <= 1 and not self._always_show:
            return []

        current = self._current
        on_first = current == 1
        on_last = current >= pages

        links = [
            self._control(LinkKind.FIRST, 1, on_first),
            self._control(LinkKind.PREVIOUS, current - 1, on_first),
        ]

        if not self.is_clean:
            window = self.compute_crumb_window()
            for x in range(window.leading):
                links.append(self._crumb(current + x - window.leading))
            links.append(LinkDescriptor(
                kind=LinkKind.CURRENT,
                href="#",
                label=str(current),
                page_number=current,
                css_classes=("number", "active"),
            ))
            for x in range(window.trailing):
                links.append(self._crumb(current + x + 1))

        links.append(self._control(LinkKind.NEXT, current + 1, on_last))
        links.append(self._control(LinkKind.LAST, pages, on_last))
        return links

    def _control(self, kind: LinkKind, page: int, disabled: bool) -> LinkDescriptor:
        classes: Tuple[str, ...] = ("copy", kind.value)
        if disabled:
            classes += ("disabled",)
        return LinkDescriptor(
            kind=kind,
            href="#" if disabled else self.render_url(page),
            label=self._labels[kind.value],
            page_number=None,
            css_classes=classes,
            disabled=disabled,
        )

    def _crumb(self, page: int) -> LinkDescriptor:
        return LinkDescriptor(
            kind=LinkKind.PAGE_NUMBER,
            href=self.render_url(page),
            label=str(page),
            page_number=page,
            css_classes=("number",),
        )

    # ── SEO ─────────────────────────────────────────────────────────────────
    # canonical исключает посторонние параметры запроса,
    # а rel prev/next сохраняют их (рекомендации Google)

    def canonical_url(self, request_path: str, host: str, scheme: Optional[str] = None) -> str:
        if self._current is None:
            raise MissingCurrentPage()
        builder = self.url_builder()
        if builder.has_placeholder:
            path = builder.build(self._current)
        else:
            path = builder.plain_target or request_path
            if self._current != 1:
                path = builder.append_param(path, self._current)
        return builder.absolute(host, path, scheme or self._scheme)

    def page_url(self, page: Optional[int] = None, request_path: str = "", host: str = "",
                 scheme: Optional[str] = None) -> str:
        """Абсолютный адрес произвольной страницы (по умолчанию: текущей)."""
        if page is None:
            if self._current is None:
                raise MissingCurrentPage()
            page = self._current
        builder = self.url_builder()
        if builder.has_placeholder:
            path = builder.build(page)
        else:
            path = builder.append_param(builder.plain_target or request_path, page)
        return builder.absolute(host, path, scheme or self._scheme)

    def rel_links(self) -> List[Tuple[str, str]]:
        """[(rel, href)] для <link rel="prev|next">."""
        self.validate()
        current = self._current
        pages = self.page_count()

        if current == 1:
            if pages > 1:
                return [("next", self.render_url(2))]
            return []

        links = [("prev", self.render_url(current - 1))]
        if pages > current:
            links.append(("next", self.render_url(current + 1)))
        return links

    def rel_prev_next_links(self) -> List[str]:
        return [href for _, href in self.rel_links()]
