# PAG/PAG/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PAG/PAG/settings.py
# Назначение: глобальные настройки проекта Django + настройки пагинатора (PAGER)
# Принципы: значения берём из .env, всё что связано с пагинацией: в словаре PAGER
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR: корень проекта (папка PAG). Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Секретный ключ берём из переменной окружения KEY_DJ; в Dev допускаем запасной
SECRET_KEY = os.getenv("KEY_DJ", "dev-only-insecure-key")

# Флаг режима разработки. В продакшене должен быть False.
DEBUG = os.getenv("DEBUG", "1") == "1"

# Список разрешённых хостов. В Dev можно оставить пустым, в проде: обязательно заполнить.
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.contenttypes",     # нужен DRF и auth
    "django.contrib.auth",             # система аутентификации (DRF ссылается на неё)
    "rest_framework",                  # DRF: JSON-представление пагинации
    "pager",                           # наше приложение пагинации
]

# ── Middleware ───────────────────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях (pager/templates)
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст (нужно тегам pager)
            ],
        },
    },
]

# ── База данных ──────────────────────────────────────────────────────────────
# Пагинатор БД не использует; SQLite нужна только служебным приложениям.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
    }
}

# ── Локализация и часовой пояс ──────────────────────────────────────────────
LANGUAGE_CODE = "ru-ru"       # язык интерфейса
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в UTC

# ── Первичный ключ по умолчанию ─────────────────────────────────────────────
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
    ],
    "DEFAULT_PAGINATION_CLASS": "pager.pagination.CrumbPageNumberPagination",  # пагинация с «крошками»
    "PAGE_SIZE": int(os.getenv("PAGER_ITEMS_PER_PAGE", "10")),  # тот же размер страницы, что и в PAGER
}

# ── Пагинатор (pager) ────────────────────────────────────────────────────────
# Всё необязательно: недостающие ключи берутся из pager.conf.DEFAULTS
PAGER = {
    "ITEMS_PER_PAGE": int(os.getenv("PAGER_ITEMS_PER_PAGE", "10")),  # записей на страницу
    "CRUMBS": int(os.getenv("PAGER_CRUMBS", "5")),                   # максимум номеров страниц
    "KEY": os.getenv("PAGER_KEY", "page"),                           # имя GET-параметра страницы
    "CLASSES": ["clearfix", "pagination"],                           # классы для <ul>
}

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pager": {
            "handlers": ["console"],
            "level": os.getenv("PAGER_LOG_LEVEL", "INFO"),  # DEBUG: видно расчёт окна крошек
            "propagate": True,
        },
    },
}
