# PAG/pager/exceptions.py
"""Ошибки пагинатора. Все локальные и синхронные: вызывающий код чинит конфигурацию."""


class PaginationError(ValueError):
    """Базовая ошибка пагинатора."""
    pass


class ConfigError(PaginationError):
    """Конфигурация неполная или неверная."""
    pass


class MissingCurrentPage(ConfigError):
    def __init__(self):
        super().__init__("PaginationState.current must be set.")


class MissingTotal(ConfigError):
    def __init__(self):
        super().__init__("PaginationState.total must be set.")


class PageRangeError(PaginationError):
    """Текущая страница вне диапазона [1, page_count]."""

    def __init__(self, message: str, page: int, page_count: int):
        super().__init__(message)
        self.page = page
        self.page_count = page_count


class PageBelowRange(PageRangeError):
    def __init__(self, page: int, page_count: int):
        super().__init__(f"Current page can't be less than 1 (got {page}).", page, page_count)


class PageAboveRange(PageRangeError):
    def __init__(self, page: int, page_count: int):
        super().__init__(
            f"Current page can't be more than the total number of pages ({page} > {page_count}).",
            page, page_count,
        )
