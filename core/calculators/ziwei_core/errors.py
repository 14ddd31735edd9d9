#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""紫微排盘异常定义"""


class ZiweiInputError(ValueError):
    """出生资料不合法（日期、时辰、历法、农历日超出 1-30 等），排盘前即失败"""


class ZiweiTableLookupError(LookupError):
    """
    查表索引越界

    说明偏移运算存在缺陷而非用户输入错误，不应被捕获后降级处理。
    """
