#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
本地排紫微命盘并输出 JSON。

用法:
  python3 scripts/ziwei/ziwei_chart.py 1990-05-15 午
  python3 scripts/ziwei/ziwei_chart.py 1990-04-21 6 --calendar lunar --gender female
  python3 scripts/ziwei/ziwei_chart.py 2020-04-20 子時 --calendar lunar --leap --prompt
"""

import argparse
import json
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, project_root)

from core.calculators.ziwei_calculator import calculate_ziwei_chart  # noqa: E402
from core.calculators.ziwei_core import ZiweiInputError  # noqa: E402
from server.utils.prompt_builders import build_ziwei_interpretation_prompt  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(description="紫微斗数排盘")
    parser.add_argument("birth_date", help="出生日期 YYYY-MM-DD")
    parser.add_argument("birth_hour", help="时辰：0-11、子時 或 子")
    parser.add_argument("--calendar", default="solar", choices=["solar", "lunar"], help="历法，默认 solar")
    parser.add_argument("--gender", default="male", help="male / female")
    parser.add_argument("--name", default="", help="姓名")
    parser.add_argument("--leap", action="store_true", help="农历闰月")
    parser.add_argument("--prompt", action="store_true", help="输出解读 prompt 而不是 JSON")
    args = parser.parse_args(argv)

    try:
        result = calculate_ziwei_chart(
            args.birth_date,
            args.birth_hour,
            calendar_type=args.calendar,
            gender=args.gender,
            name=args.name,
            is_leap_month=args.leap,
        )
    except ZiweiInputError as exc:
        print(f"输入错误: {exc}", file=sys.stderr)
        return 2

    data = result.to_dict()
    if args.prompt:
        print(build_ziwei_interpretation_prompt(data["profile"], data["chart"]))
    else:
        print(json.dumps(data, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
