# PAG/pager/pagination.py
from rest_framework.pagination import PageNumberPagination  # пагинация DRF
from rest_framework.response import Response

from .serializers import LinkDescriptorSerializer
from .services.pagination import PaginationState


class CrumbPageNumberPagination(PageNumberPagination):
    """Стандартная пагинация DRF + page_count и «крошки» (как в HTML-версии)."""
    page_size_query_param = "page_size"
    max_page_size = 500

    def get_crumb_state(self) -> PaginationState:
        paginator = self.page.paginator
        state = PaginationState(
            self.page.number, paginator.count, paginator.per_page,
            key=self.page_query_param,
        )
        state.set_path(self.request.path, self.request.query_params)
        return state

    def get_paginated_response(self, data):
        state = self.get_crumb_state()
        return Response({
            "count": self.page.paginator.count,
            "page_count": state.page_count(),
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "crumbs": LinkDescriptorSerializer(state.build_links(), many=True).data,
            "results": data,
        })
