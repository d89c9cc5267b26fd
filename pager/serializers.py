# PAG/pager/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PAG/pager/serializers.py
# Назначение: DRF-сериализаторы для ссылок пагинации (JSON вместо HTML)
# ─────────────────────────────────────────────────────────────────────────────

from typing import Any, Dict, List  # типы для подсказок
from rest_framework import serializers  # импорт базового сериализатора


class LinkDescriptorSerializer(serializers.Serializer):
    """Одна ссылка пагинации: тип, адрес, подпись, классы."""
    kind = serializers.CharField(read_only=True)                        # first / previous / page_number / current / next / last
    page_number = serializers.IntegerField(read_only=True, allow_null=True)  # только у крошек
    href = serializers.CharField(read_only=True)                        # адрес или "#"
    label = serializers.CharField(read_only=True)                       # текст ссылки
    css_classes = serializers.ListField(child=serializers.CharField(), read_only=True)  # классы <li>
    disabled = serializers.BooleanField(read_only=True)                 # неактивна (край диапазона)
    is_crumb = serializers.BooleanField(read_only=True)                 # номер страницы или нет


class PaginationStateSerializer(serializers.Serializer):
    """Снимок PaginationState: параметры + вычисленные ссылки."""
    current = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    items_per_page = serializers.IntegerField(read_only=True)
    page_count = serializers.SerializerMethodField()
    links = serializers.SerializerMethodField()

    def get_page_count(self, obj) -> int:
        return obj.page_count()

    def get_links(self, obj) -> List[Dict[str, Any]]:
        return LinkDescriptorSerializer(obj.build_links(), many=True).data
