# PAG/pager/tests/conftest.py
import pytest
from django.template import Context, Template

from pager.services.pagination import PaginationState


@pytest.fixture
def make_state():
    """Фабрика состояний: make_state(current, total, per=10, **opts)."""
    def _make(current=1, total=200, per=10, **options):
        return PaginationState(current, total, per, **options)
    return _make


@pytest.fixture
def render_tpl(rf):
    """Рендер строки шаблона с request в контексте (как делает context processor)."""
    def _render(source, url="/search/", **ctx):
        request = rf.get(url)
        return Template("{% load pager_tags %}" + source).render(Context({"request": request, **ctx}))
    return _render
