#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数基础常量

天干、地支、宫位、五行局、星曜名称、时辰标签等。
所有位置均以地支序号（子=0 … 亥=11）表示。
"""

HEAVENLY_STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')

EARTHLY_BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 十二宫，按命宫起逆排
PALACE_NAMES = (
    '命宮', '兄弟', '夫妻', '子女', '財帛', '疾厄',
    '遷移', '交友', '官祿', '田宅', '福德', '父母',
)

# 五行局数 -> 局名
BUREAU_NAMES = {
    2: '水二局',
    3: '木三局',
    4: '金四局',
    5: '土五局',
    6: '火六局',
}

# 紫微星系 / 天府星系
ZIWEI_GROUP_NAMES = ('紫微', '天機', '太陽', '武曲', '天同', '廉貞')
TIANFU_GROUP_NAMES = ('天府', '太陰', '貪狼', '巨門', '天相', '天梁', '七殺', '破軍')
MAJOR_STAR_NAMES = ZIWEI_GROUP_NAMES + TIANFU_GROUP_NAMES

MINOR_STAR_NAMES = (
    '文昌', '文曲', '左輔', '右弼', '天魁', '天鉞',
    '祿存', '擎羊', '陀羅', '火星', '鈴星', '地空', '地劫',
)

BRIGHTNESS_LEVELS = ('廟', '旺', '得', '利', '平', '不', '陷')

# 四化
FOUR_TRANSFORMATION_TAGS = ('化祿', '化權', '化科', '化忌')
FOUR_TRANSFORMATION_KEYS = ('HUA_LU', 'HUA_QUAN', 'HUA_KE', 'HUA_JI')

# 宫位无四化时的标记
NO_TRANSFORMATION_MARK = '否'
# 四化星未落入命盘
TRANSFORMATION_NOT_FOUND = '未顯示'

# 十二时辰，序号即地支序号
BIRTH_HOURS = (
    '子時 (23:00-01:00)',
    '丑時 (01:00-03:00)',
    '寅時 (03:00-05:00)',
    '卯時 (05:00-07:00)',
    '辰時 (07:00-09:00)',
    '巳時 (09:00-11:00)',
    '午時 (11:00-13:00)',
    '未時 (13:00-15:00)',
    '申時 (15:00-17:00)',
    '酉時 (17:00-19:00)',
    '戌時 (19:00-21:00)',
    '亥時 (21:00-23:00)',
)

GENDER_LABELS = {
    'male': '男',
    'female': '女',
}

CALENDAR_SOLAR = 'solar'
CALENDAR_LUNAR = 'lunar'
CALENDAR_LABELS = {
    CALENDAR_SOLAR: '國曆',
    CALENDAR_LUNAR: '農曆',
}

LEAP_MONTH_CORRECTION_NOTE = '(閏月修正)'
