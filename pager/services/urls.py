# PAG/pager/services/urls.py
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from django.utils.http import urlencode

logger = logging.getLogger(__name__)

# printf-токены шаблона: %% (литерал) и %d / %s / %03d / %-3d
TOKEN = re.compile(r"%%|%(?P<width>-?\d*)[ds]")


def _looks_like_escape(width: str) -> bool:
    # %20d, %25s: это URL-escape (%20, %25) и буква, а не ширина поля
    return len(width) >= 2 and width[0] in "123456789"


def render_target(target: str, page: int) -> Tuple[str, bool]:
    """Разбирает target слева направо, как sprintf.

    %% превращается в %, первый настоящий плейсхолдер получает номер
    страницы, URL-escape (%20, %2F …) остаётся как есть.
    Возвращает (адрес, была ли подстановка).
    """
    out: List[str] = []
    pos = 0
    substituted = False
    for m in TOKEN.finditer(target):
        out.append(target[pos:m.start()])
        pos = m.end()
        width = m.group("width")
        if width is None:
            out.append("%")
        elif not substituted and not _looks_like_escape(width):
            out.append(("%" + width + "d") % int(page))
            substituted = True
        else:
            out.append(m.group(0))
    out.append(target[pos:])
    return "".join(out), substituted


class URLBuilder:
    """Превращает номер страницы в href.

    Два режима:
      * target задан: подставляем номер в шаблон ("/search/%d/");
        шаблон без плейсхолдера используется как есть + ?key=N;
      * target пустой: берём путь текущего запроса (его передаёт вызывающий,
        сами в request не лезем) и пересобираем query, заменяя key=N.
    """

    def __init__(self, target: str = "", key: str = "page", path: str = "", query: Any = None):
        self.target = target or ""
        self.key = key
        self.path = path or ""
        self.query = query

    @property
    def has_placeholder(self) -> bool:
        return render_target(self.target, 0)[1]

    @property
    def plain_target(self) -> str:
        """target без плейсхолдера, с %% свёрнутыми в %."""
        return render_target(self.target, 0)[0]

    def page_param(self, page: int) -> str:
        return f"?{self.key}={int(page)}"

    def append_param(self, url: str, page: int) -> str:
        """Дописывает key=N к адресу, учитывая уже имеющийся '?'."""
        param = self.page_param(page)
        if "?" in url:
            return url + "&" + param[1:]
        return url + param

    def build(self, page: int) -> str:
        if self.target:
            url, substituted = render_target(self.target, page)
            if substituted:
                return url
            return self.append_param(url, page)

        logger.debug("No target configured, falling back to request path %r", self.path)
        params = self._other_params()
        params[self.key] = [str(int(page))]
        return f"{self.path}?{urlencode(params, doseq=True)}"

    def _other_params(self) -> Dict[str, List[str]]:
        # QueryDict (request.GET) хранит списки значений: сохраняем все
        if self.query is None:
            return {}
        if hasattr(self.query, "lists"):
            items = self.query.lists()
        else:
            items = self.query.items()
        params: Dict[str, List[str]] = {}
        for name, value in items:
            if name == self.key:
                continue
            params[name] = list(value) if isinstance(value, (list, tuple)) else [value]
        return params

    @staticmethod
    def absolute(host: str, path: str, scheme: Optional[str] = "http") -> str:
        """host уже может содержать схему (https://example.com): тогда не дублируем."""
        if "://" in host:
            return f"{host.rstrip('/')}{path}"
        return f"{scheme}://{host}{path}"
