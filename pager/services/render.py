# PAG/pager/services/render.py
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from django.template.loader import render_to_string
from django.utils.html import format_html_join
from django.utils.safestring import SafeString

from ..conf import pager_settings
from .pagination import LinkDescriptor, PaginationState


class RenderAdapter:
    """Разметка из LinkDescriptor'ов через шаблон Django (по умолчанию pager/pagination.html)."""

    def __init__(self, template_name: Optional[str] = None):
        self.template_name = template_name or pager_settings()["TEMPLATE"]

    def render(self, links: Sequence[LinkDescriptor], classes: Iterable[str] = ()) -> SafeString:
        # пустой список: блок пагинации не выводим вовсе
        if not links:
            return SafeString("")
        return render_to_string(self.template_name, {
            "links": links,
            "classes": " ".join(classes),
        })

    def render_state(self, state: PaginationState) -> SafeString:
        return self.render(state.build_links(), state.classes)

    def render_rel_links(self, state: PaginationState) -> SafeString:
        """<link rel="prev|next" href="..." />: по одному тегу на строку."""
        return format_html_join("\n", '<link rel="{}" href="{}" />', state.rel_links())
