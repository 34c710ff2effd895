"""
分段器 - 把原始文本切成条目

- Tab模式：按行切分，每行按Tab切列；少于2列的行丢弃；
  首个保留行若像表头（检查列含 BOOKING/BKG/LINE 等标记）则丢弃
- 自由文本模式：按行首序号（1. / 1) / 1 空格）切分，空条目丢弃；
  无序号的文本整体作为一个条目
"""

from __future__ import annotations

import re

from ..models import PasteItem

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_ENUMERATOR = re.compile(r"^[ \t]*\d{1,3}(?:[.)]|[ \t]+)", re.MULTILINE)


def segment_delimited(
    text: str | None,
    header_markers: list[str] | None = None,
    header_columns: list[int] | None = None,
) -> list[PasteItem]:
    """Tab分隔文本 -> 条目（cells已去除首尾空白）"""
    markers = [m.upper() for m in (header_markers or [])]
    columns = header_columns or [0]

    items: list[PasteItem] = []
    for line in _LINE_BREAK.split(text or ""):
        cells = line.split("\t")
        if len(cells) < 2:
            continue
        cells = [c.strip() for c in cells]
        if not items and _looks_like_header(cells, markers, columns):
            continue
        items.append(PasteItem(index=len(items) + 1, text=line, cells=cells))
    return items


def _looks_like_header(cells: list[str], markers: list[str], columns: list[int]) -> bool:
    for col in columns:
        if col < len(cells):
            cell = cells[col].upper()
            if any(marker in cell for marker in markers):
                return True
    return False


def segment_freeform(text: str | None) -> list[PasteItem]:
    """自由文本 -> 按序号切分的条目"""
    text = text or ""
    starts = [m.start() for m in _ENUMERATOR.finditer(text)]

    if not starts:
        chunks = [text]
    else:
        # 首个序号之前的内容并入第一个条目
        bounds = starts[1:] + [len(text)]
        chunks = [text[: bounds[0]]] + [text[s:e] for s, e in zip(starts[1:], bounds[1:])]

    items: list[PasteItem] = []
    for chunk in chunks:
        body = _ENUMERATOR.sub("", chunk, count=1).strip()
        if not body:
            continue
        items.append(PasteItem(index=len(items) + 1, text=body))
    return items
