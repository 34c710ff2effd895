import argparse
import json
import sys
from datetime import date
from pathlib import Path

from .config import configure_logging, get_config
from .pipeline import BulkPasteEngine


def _read_input(path: str) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse pasted PTI booking text into draft records (JSON)."
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="输入文本文件（默认：stdin）",
    )
    parser.add_argument(
        "--type",
        dest="record_type",
        choices=["standard", "special"],
        default="standard",
        help="记录类型（默认：standard）",
    )
    parser.add_argument(
        "--date",
        dest="reference_date",
        default="",
        help="基准日期 YYYY-MM-DD（默认：今天）",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="同时输出模式/条目数/告警标记",
    )
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(config)

    try:
        reference_date = date.fromisoformat(args.reference_date) if args.reference_date else None
    except ValueError:
        parser.error(f"日期格式错误: {args.reference_date}")

    try:
        text = _read_input(args.file)
    except OSError as e:
        print(f"读取输入失败: {e}", file=sys.stderr)
        return 1

    engine = BulkPasteEngine(config=config)
    result = engine.parse_with_report(text, args.record_type, reference_date)
    payload = [record.to_payload() for record in result.records]

    if args.report:
        output = {
            "mode": result.mode,
            "recordType": result.record_type.value,
            "itemCount": result.item_count,
            "flags": result.flags,
            "records": payload,
        }
    else:
        output = payload

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
