# app/utils/paging.py
from __future__ import annotations

__all__ = [
    "PAGE_SIZE",
    "page_offset",
]

PAGE_SIZE = 20


def page_offset(page: int, per_page: int = PAGE_SIZE) -> int:
    """1始まりのページ番号をオフセットに変換する。

    - page=1 -> 0, page=2 -> per_page ...
    - 1 未満は 1 ページ目として扱う（HTTP 層では ge=1 で弾く想定）
    """
    return (max(int(page), 1) - 1) * per_page
