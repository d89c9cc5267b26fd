import logging

from django import template
from django.core.exceptions import ImproperlyConfigured

from pager.conf import pager_settings
from pager.services.pagination import PaginationState
from pager.services.render import RenderAdapter

logger = logging.getLogger(__name__)

register = template.Library()


def _page_from_request(request, key):
    """Номер страницы из ?page=…; мусор или отсутствие: первая страница."""
    raw = request.GET.get(key) if request is not None else None
    try:
        return int(raw)
    except (TypeError, ValueError):
        if raw is not None:
            logger.debug("Invalid page value %r for key %s, using 1", raw, key)
        return 1


def _build_state(context, total, current=None, per=None, **options):
    # новый экземпляр на каждый рендер, состояние между запросами не делим
    request = context.get("request")
    key = options.get("key") or pager_settings()["KEY"]
    if current is None:
        current = _page_from_request(request, key)
    state = PaginationState(current, total, per, **options)
    if request is not None:
        state.set_path(request.path, request.GET)
    return state


@register.simple_tag(takes_context=True)
def pagination(context, total, current=None, per=None, **options):
    """
    Готовая разметка пагинации:
        {% pagination paginator.count per=20 crumbs=7 %}
    Текущую страницу берём из request.GET, если не передана явно.
    """
    return RenderAdapter().render_state(_build_state(context, total, current, per, **options))


@register.simple_tag(takes_context=True)
def pagination_state(context, total, current=None, per=None, **options):
    """{% pagination_state total as pager %}: объект для canonical/rel/своей разметки."""
    return _build_state(context, total, current, per, **options)


@register.simple_tag(takes_context=True)
def canonical_url(context, state):
    request = context.get("request")
    if request is None:
        raise ImproperlyConfigured(
            "canonical_url needs request in the template context: "
            "add django.template.context_processors.request to TEMPLATES."
        )
    return state.canonical_url(request.path, request.get_host(), scheme=request.scheme)


@register.simple_tag
def rel_prev_next(state):
    return RenderAdapter().render_rel_links(state)


@register.simple_tag(name="crumb_numbers")
def crumb_numbers_tag(state):
    """Список номеров страниц для своей разметки (аналог page_window)."""
    return state.crumb_numbers()
