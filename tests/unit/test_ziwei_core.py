#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""紫微排盘各步骤单元测试"""

import pytest

from core.calculators.ziwei_core import (
    BRIGHTNESS_TABLE,
    StarPlacement,
    ZiweiInputError,
    ZiweiTableLookupError,
    assign_palace_stems,
    body_palace_branch,
    bureau_name,
    bureau_number,
    format_star_label,
    get_brightness,
    life_palace_branch,
    locate_anchor_stars,
    lookup,
    normalize10,
    normalize12,
    palace_name,
    palace_stem,
    place_major_stars,
    place_minor_stars,
    purple_star_branch,
    resolve_four_transformations,
    tianfu_branch,
    tiger_start_stem,
)
from core.calculators.ziwei_core.star_placement import (
    dikong_dijie,
    huo_ling,
    kui_yue,
    lucun_yang_tuo,
    wenchang_wenqu,
    zuofu_youbi,
)
from core.data.ziwei_constants import PALACE_NAMES


class TestCycle:
    @pytest.mark.parametrize("n, expected", [(0, 0), (11, 11), (12, 0), (-1, 11), (-13, 11), (16, 4), (-24, 0)])
    def test_normalize12(self, n, expected):
        assert normalize12(n) == expected

    @pytest.mark.parametrize("n, expected", [(0, 0), (9, 9), (10, 0), (-1, 9), (13, 3)])
    def test_normalize10(self, n, expected):
        assert normalize10(n) == expected

    def test_lookup_out_of_range_is_fatal(self):
        with pytest.raises(ZiweiTableLookupError):
            lookup((1, 2, 3), 3, 'T')
        with pytest.raises(ZiweiTableLookupError):
            lookup((1, 2, 3), -1, 'T')


class TestFiveTigers:
    def test_jia_year_starts_bing_yin(self):
        assert tiger_start_stem(0) == 2

    @pytest.mark.parametrize("year_stem, expected", [(1, 4), (2, 6), (3, 8), (4, 0), (5, 2), (9, 0)])
    def test_start_table(self, year_stem, expected):
        assert tiger_start_stem(year_stem) == expected

    def test_jia_year_stems(self):
        # 甲年：丙子 丁丑 丙寅 丁卯 … 甲戌 乙亥
        assert assign_palace_stems(0) == (2, 3, 2, 3, 4, 5, 6, 7, 8, 9, 0, 1)

    @pytest.mark.parametrize("year_stem", range(10))
    def test_stems_are_periodic(self, year_stem):
        # 自寅宫起顺排，子丑两宫接在亥宫之后
        stems = assign_palace_stems(year_stem)
        for i in range(12):
            for j in range(12):
                assert (stems[i] - stems[j]) % 10 == (normalize12(i - 2) - normalize12(j - 2)) % 10

    def test_palace_stem_matches_assignment(self):
        stems = assign_palace_stems(7)
        assert [palace_stem(7, i) for i in range(12)] == list(stems)

    def test_bad_year_stem(self):
        with pytest.raises(ZiweiTableLookupError):
            tiger_start_stem(10)


class TestPalacePosition:
    def test_first_month_zi_hour(self):
        assert life_palace_branch(1, 0) == 2
        assert body_palace_branch(1, 0) == 2

    def test_life_counts_backward_body_forward(self):
        assert life_palace_branch(3, 2) == 2
        assert body_palace_branch(3, 2) == 6

    def test_wraparound(self):
        assert life_palace_branch(1, 11) == 3
        assert body_palace_branch(12, 11) == 0

    @pytest.mark.parametrize("month", range(1, 13))
    def test_life_and_body_coincide_only_at_zi_and_wu(self, month):
        same = [h for h in range(12) if life_palace_branch(month, h) == body_palace_branch(month, h)]
        assert same == [0, 6]

    def test_invalid_month_and_hour(self):
        with pytest.raises(ZiweiInputError):
            life_palace_branch(0, 0)
        with pytest.raises(ZiweiInputError):
            body_palace_branch(1, 12)

    @pytest.mark.parametrize("life", range(12))
    def test_palace_names_rotate_with_life(self, life):
        names = [palace_name(life, i) for i in range(12)]
        assert sorted(names) == sorted(PALACE_NAMES)
        assert names[life] == '命宮'
        assert names[normalize12(life - 1)] == '兄弟'
        assert names[normalize12(life + 1)] == '父母'


class TestBureau:
    def test_bing_yin_is_fire_six(self):
        assert bureau_number(2, 2) == 6
        assert bureau_name(6) == '火六局'

    @pytest.mark.parametrize("stem, branch, expected", [
        (0, 0, 4),   # 甲子 海中金
        (0, 2, 2),   # 甲寅 大溪水
        (8, 4, 2),   # 壬辰 長流水
        (4, 6, 6),   # 戊午 天上火
        (9, 11, 2),  # 癸亥 大海水
    ])
    def test_table(self, stem, branch, expected):
        assert bureau_number(stem, branch) == expected

    def test_all_results_valid(self):
        for stem in range(10):
            for branch in range(12):
                assert bureau_number(stem, branch) in (2, 3, 4, 5, 6)

    def test_unknown_bureau_name(self):
        with pytest.raises(ZiweiTableLookupError):
            bureau_name(7)


class TestPurpleStar:
    def test_water_two_first_day(self):
        assert purple_star_branch(2, 1) == 1

    def test_last_day(self):
        assert purple_star_branch(6, 30) == 6

    def test_tianfu_mirror(self):
        assert tianfu_branch(9) == 7
        assert tianfu_branch(2) == 2
        assert tianfu_branch(8) == 8
        assert tianfu_branch(0) == 4

    def test_locate_anchor_stars(self):
        assert locate_anchor_stars(6, 1) == (9, 7)

    @pytest.mark.parametrize("day", [0, 31, -1])
    def test_day_out_of_range(self, day):
        with pytest.raises(ZiweiInputError):
            purple_star_branch(2, day)

    def test_unknown_bureau(self):
        with pytest.raises(ZiweiTableLookupError):
            purple_star_branch(7, 1)


class TestBrightness:
    def test_table_covers_major_stars_and_wen(self):
        assert len(BRIGHTNESS_TABLE) == 16
        assert all(len(levels) == 12 for levels in BRIGHTNESS_TABLE.values())

    def test_override_literal(self):
        assert get_brightness('紫微', 8) == '旺'

    def test_lookup(self):
        assert get_brightness('紫微', 2) == '廟'
        assert get_brightness('文昌', 10) == '廟'
        assert get_brightness('擎羊', 3) is None

    def test_label(self):
        assert format_star_label('紫微', '廟') == '紫微(廟)'
        assert format_star_label('天魁', None) == '天魁'


class TestMinorStarPositions:
    def test_wenchang_wenqu(self):
        assert wenchang_wenqu(0) == (10, 4)
        assert wenchang_wenqu(11) == (11, 3)

    def test_zuofu_youbi(self):
        assert zuofu_youbi(1) == (4, 10)
        assert zuofu_youbi(12) == (3, 11)

    def test_kui_yue(self):
        assert kui_yue(0) == (1, 7)
        assert kui_yue(7) == (6, 2)

    def test_lucun_yang_tuo(self):
        assert lucun_yang_tuo(0) == (2, 3, 1)
        assert lucun_yang_tuo(9) == (0, 1, 11)

    @pytest.mark.parametrize("year_branch, expected", [
        (2, (1, 3)), (6, (1, 3)), (10, (1, 3)),
        (5, (3, 10)), (9, (3, 10)), (1, (3, 10)),
        (11, (9, 10)), (3, (9, 10)), (7, (9, 10)),
        (0, (2, 10)), (4, (2, 10)), (8, (2, 10)),
    ])
    def test_huo_ling_start(self, year_branch, expected):
        assert huo_ling(year_branch, 0) == expected

    def test_huo_ling_hour_offsets(self):
        assert huo_ling(0, 3) == (5, 7)

    def test_dikong_dijie(self):
        assert dikong_dijie(0) == (11, 11)
        assert dikong_dijie(1) == (10, 0)


class TestStarPlacement:
    @pytest.fixture
    def placement(self):
        p = StarPlacement()
        place_major_stars(p, 9, 7)
        place_minor_stars(p, hour_index=0, month=1, year_stem=0, year_branch=0)
        return p

    def test_major_positions(self, placement):
        major, _ = placement.stars_at(9)
        assert [s.label for s in major] == ['紫微(旺)', '貪狼(平)']
        major, _ = placement.stars_at(5)
        assert [s.name for s in major] == ['武曲', '破軍']

    def test_empty_palaces_preserved(self, placement):
        assert placement.stars_at(2)[0] == ()
        assert placement.stars_at(3)[0] == ()

    def test_minor_positions(self, placement):
        _, minor = placement.stars_at(10)
        assert [s.label for s in minor] == ['文昌(廟)', '右弼', '鈴星']
        _, minor = placement.stars_at(11)
        assert [s.name for s in minor] == ['地空', '地劫']

    def test_every_star_placed_once(self, placement):
        names = placement.star_names
        assert len(names) == 27
        assert len(set(names)) == 27

    def test_duplicate_star_rejected(self, placement):
        with pytest.raises(ZiweiTableLookupError):
            placement.add('紫微', 0, 'major')


class TestFourTransformations:
    def test_jia_year(self):
        p = StarPlacement()
        place_major_stars(p, 9, 7)
        place_minor_stars(p, 0, 1, 0, 0)
        four, markers = resolve_four_transformations(0, p)
        assert four.to_dict() == {
            'HUA_LU': '廉貞 (丑)',
            'HUA_QUAN': '破軍 (巳)',
            'HUA_KE': '武曲 (巳)',
            'HUA_JI': '太陽 (午)',
        }
        assert markers == {1: ['化祿'], 5: ['化權', '化科'], 6: ['化忌']}

    def test_minor_star_target(self):
        # 戊年化科在右弼
        p = StarPlacement()
        place_major_stars(p, 9, 7)
        place_minor_stars(p, 0, 1, 4, 0)
        four, markers = resolve_four_transformations(4, p)
        assert four.results[2].star == '右弼'
        assert four.results[2].branch == 10
        assert '化科' in markers[10]

    def test_missing_star_is_sentinel(self):
        # 只安主星时，文昌不在盘中
        p = StarPlacement()
        place_major_stars(p, 9, 7)
        four, markers = resolve_four_transformations(2, p)
        assert four.to_dict()['HUA_KE'] == '文昌 (未顯示)'
        assert four.found_count == 3
        assert sum(len(tags) for tags in markers.values()) == 3

    def test_major_preferred_over_minor(self):
        p = StarPlacement()
        p.add('文曲', 3, 'minor')
        p.add('太陽', 8, 'major')
        assert p.find('太陽').branch == 8
        assert p.find('文曲').tier == 'minor'
        assert p.find('天同') is None
