# -*- coding: utf-8 -*-
"""
Prompt 构建工具模块

把排好的紫微命盘整理成交给大模型解读的文本。
只依赖排盘输出的普通字典（Profile.to_dict / Chart.to_dict），不依赖 FastAPI。
"""

from typing import Any, Dict, List

ZIWEI_SYSTEM_INSTRUCTION = """
角色： 精通「飛星派紫微斗數」的大師。
任務： 解析命盤，提供結構化的數據。

**核心分析要求**：
1. **overall_destiny (本命特點 與 格局分析)**：
   - **必須** 分析「三方四正」（命宮、財帛、官祿、遷移）的整體架構。
   - **必須** 判斷是否存在特殊格局（例如：殺破狼、機月同梁、紫府同宮、日月並明、巨日同宮、石中隱玉...等）。
   - 若有格局，請說明該格局的特質。
   - 字數控制在 150-200 字，精簡扼要。

2. **palaces (宮位解析)**：
   - 順序：命宮、財帛宮、官祿宮，其餘按順序。
   - **stars_detail**：針對宮內每顆星曜（主星、吉煞星）進行影響分析，需結合「亮度（廟旺利陷）」與「四化（祿權科忌）」的交互影響。
   - **空宮處理**：若該宮位無主星（空宮），請參考提供的「借對宮主星」資訊進行分析，並註明是借用對宮力量，力量會有所折損。
   - 風格：現代、口語、實用，避免過於艱澀的古文，直接給予生活建議。
""".strip()

EMPTY_PALACE_INSTRUCTION = "指令：此為空宮，請借對宮主星進行分析，但請註明影響力較弱（約七成）。"


def opposite_palace(all_palaces: List[Dict[str, Any]], index: int) -> Dict[str, Any]:
    """对宫（相隔六宫）"""
    return all_palaces[(index + 6) % 12]


def _format_palace(all_palaces: List[Dict[str, Any]], index: int) -> str:
    palace = all_palaces[index]
    lines = [f"【{palace['name']}】({palace['stem']}{palace['branch']}):"]

    if palace['major_stars']:
        lines.append(f"  主星: [{', '.join(palace['major_stars'])}]")
    else:
        opposite = opposite_palace(all_palaces, index)
        lines.append("  主星: [無] (空宮)")
        lines.append(f"  借對宮主星參考: [{', '.join(opposite['major_stars'])}] (來自{opposite['name']})")

    lines.append(f"  輔/煞/雜星: [{', '.join(palace['minor_stars'])}]")
    lines.append(f"  四化標記: {palace['is_four_transformed']}")
    if not palace['major_stars']:
        lines.append(f"  {EMPTY_PALACE_INSTRUCTION}")
    return '\n'.join(lines)


def build_ziwei_interpretation_prompt(profile: Dict[str, Any], chart: Dict[str, Any]) -> str:
    """
    构建紫微命盘解读 prompt

    Args:
        profile: Profile.to_dict()
        chart: Chart.to_dict()

    Returns:
        str: 命盘描述文本
    """
    four = chart['four_transformations']
    all_palaces = chart['all_palaces']

    sections = [
        f"使用者：{profile['name']}, {profile['gender']}, {profile['five_elements_bureau']}, "
        f"農曆：{profile['lunar_date_time']}",
        "",
        "四化星：",
        f"祿：{four['HUA_LU']}",
        f"權：{four['HUA_QUAN']}",
        f"科：{four['HUA_KE']}",
        f"忌：{four['HUA_JI']}",
        "",
        "各宮位詳細星曜與狀態：",
    ]
    sections.extend(_format_palace(all_palaces, index) for index in range(len(all_palaces)))
    return '\n'.join(sections)
