# pager/apps.py
from django.apps import AppConfig


class PagerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pager"
    verbose_name = "Пагинация"

    def ready(self):
        # проверяем PAGER один раз при старте, чтобы опечатки в ключах были видны в логе
        from .conf import pager_settings
        pager_settings()
