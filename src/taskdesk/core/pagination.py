"""
Постраничная выдача.

Формат ответа совпадает с привычным для фронтенда:
``{"data": [...], "current_page": 1, "last_page": 2, "total": 15, "links": [...], ...}``
"""
from typing import Any, Generic, List, Optional, Sequence, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# Сколько страниц показывать по обе стороны от текущей в links
LINKS_ON_EACH_SIDE = 3


class PageLink(BaseModel):
    url: Optional[str] = None
    label: str
    active: bool = False


class Page(BaseModel, Generic[T]):
    """Страница результатов"""
    model_config = ConfigDict(populate_by_name=True)

    current_page: int
    data: List[T]
    first_page_url: str
    from_: Optional[int] = Field(None, alias="from")
    last_page: int
    last_page_url: str
    links: List[PageLink]
    next_page_url: Optional[str] = None
    path: str
    per_page: int
    prev_page_url: Optional[str] = None
    to: Optional[int] = None
    total: int


def resolve_page(value: Any) -> int:
    """Номер страницы из query-параметра; все некорректное - первая страница"""
    try:
        page = int(str(value).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def page_url(path: str, page: int) -> str:
    return f"{path}?page={page}"


def _link_pages(current: int, last: int) -> List[Optional[int]]:
    """Номера страниц для links; None - разделитель '...'"""
    window = LINKS_ON_EACH_SIDE * 2 + 1
    if last <= window + 4:
        return list(range(1, last + 1))

    start = max(current - LINKS_ON_EACH_SIDE, 1)
    end = min(current + LINKS_ON_EACH_SIDE, last)

    pages: List[Optional[int]] = []
    if start > 3:
        pages.extend([1, 2, None])
    else:
        start = 1
    if end < last - 2:
        pages.extend(range(start, end + 1))
        pages.extend([None, last - 1, last])
    else:
        pages.extend(range(start, last + 1))
    return pages


def build_links(path: str, current: int, last: int) -> List[PageLink]:
    links = [PageLink(
        url=page_url(path, current - 1) if current > 1 else None,
        label="&laquo; Previous"
    )]

    for number in _link_pages(current, last):
        if number is None:
            links.append(PageLink(label="..."))
        else:
            links.append(PageLink(
                url=page_url(path, number),
                label=str(number),
                active=number == current
            ))

    links.append(PageLink(
        url=page_url(path, current + 1) if current < last else None,
        label="Next &raquo;"
    ))
    return links


def paginate(
    items: Sequence[T],
    page: int,
    per_page: int,
    *,
    total: Optional[int] = None,
    path: str = ""
) -> Page[T]:
    """
    Построение страницы.

    Args:
        items: Все элементы, либо уже вырезанное окно страницы,
            если передан total
        page: Номер страницы (с 1)
        per_page: Размер страницы
        total: Общее число элементов, если items - только окно
        path: Базовый URL для ссылок

    Returns:
        Page. Страница за пределами диапазона возвращается пустой.
    """
    page = max(page, 1)
    if total is None:
        total = len(items)
        offset = (page - 1) * per_page
        window = list(items[offset:offset + per_page])
    else:
        window = list(items)

    last_page = max((total + per_page - 1) // per_page, 1)
    first_index = (page - 1) * per_page + 1

    return Page(
        current_page=page,
        data=window,
        first_page_url=page_url(path, 1),
        from_=first_index if window else None,
        last_page=last_page,
        last_page_url=page_url(path, last_page),
        links=build_links(path, page, last_page),
        next_page_url=page_url(path, page + 1) if page < last_page else None,
        path=path,
        per_page=per_page,
        prev_page_url=page_url(path, page - 1) if page > 1 else None,
        to=first_index + len(window) - 1 if window else None,
        total=total
    )
