# -*- coding: utf-8 -*-


"""
중성
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from collections import namedtuple

from hangul_jaso.norm.nfd import JUNGSEONG_FIRST, JUNGSEONG_LAST


#############
# constants #
#############
_MIDDLE_COMPAT = ['ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ',    # ㅏ ㅐ ㅑ ㅒ ㅓ
                  'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
                  'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ',
                  'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ',
                  'ㅣ']


#########
# types #
#########
class Jungseong(namedtuple('Jungseong', ['code', 'compatibility_value'])):
    """
    중성
    """
    __slots__ = ()

    def __new__(cls, code: int):
        """
        Args:
            code:  중성 자모 코드 (U+1161 ~ U+1175)
        """
        assert JUNGSEONG_FIRST <= code <= JUNGSEONG_LAST, \
               '중성 자모가 아닙니다: U+{:04X}'.format(code)
        return super().__new__(cls, code, _MIDDLE_COMPAT[code - JUNGSEONG_FIRST])

    def __str__(self):
        return self.compatibility_value
