"""Iteração de listagens paginadas por cursor."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from typing import TypeVar

ItemT = TypeVar("ItemT")

PageFetcher = Callable[[str | None], Awaitable[tuple[Sequence[ItemT], str | None]]]


async def iterate_all(fetch_page: PageFetcher[ItemT]) -> AsyncIterator[ItemT]:
    """Percorre todas as páginas, chamando `fetch_page(after)` até o cursor acabar.

    Args:
        fetch_page: Recebe o cursor `after` (None na primeira página) e
            devolve (itens, próximo cursor)

    Yields:
        Itens de cada página, em ordem.
    """
    after: str | None = None
    while True:
        items, after = await fetch_page(after)
        for item in items:
            yield item
        if after is None:
            return
