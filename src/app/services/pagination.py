from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# OFFSET is bound as a signed 64-bit integer by PostgreSQL and SQLite
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page of a task listing"""

    page_size: int = DEFAULT_PAGE_SIZE
    page_number: int = 0

    @property
    def offset(self) -> int:
        return self.page_size * self.page_number

    @classmethod
    def of(cls, page_size: int, page_number: int, max_page_size: int = MAX_PAGE_SIZE) -> "PageRequest":
        """
        Clamp caller-supplied paging to [1, max_page_size] and a non-negative page

        Pages past the largest representable offset are pinned to it; such a
        page is simply empty.
        """
        size = min(max(int(page_size), 1), max_page_size)
        number = min(max(int(page_number), 0), MAX_OFFSET // size)
        return cls(page_size=size, page_number=number)
