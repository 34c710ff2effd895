"""
模式选择 - 判定粘贴文本走Tab分隔还是自由文本

规则：
1. 含Tab -> Tab分隔（与记录类型无关）
2. 无Tab且为SPECIAL -> 自由文本
3. 无Tab且为STANDARD -> 仍走Tab分隔（单列行会被丢弃，结果为空）
"""

from __future__ import annotations

from ..models import ModeDecision, RecordType


def select_mode(text: str | None, record_type: RecordType | str = RecordType.STANDARD) -> ModeDecision:
    """判定解析模式（不抛异常）"""
    rt = RecordType(record_type)
    if "\t" in (text or ""):
        return ModeDecision(delimited=True, record_type=rt)
    if rt == RecordType.SPECIAL:
        return ModeDecision(delimited=False, record_type=rt)
    return ModeDecision(delimited=True, record_type=rt)
