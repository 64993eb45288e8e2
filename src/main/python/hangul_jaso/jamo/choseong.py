# -*- coding: utf-8 -*-


"""
초성
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from collections import namedtuple

from hangul_jaso.norm.nfd import CHOSEONG_FIRST, CHOSEONG_LAST


#############
# constants #
#############
# U+1100 ~ U+1112 순서의 호환 영역 초성
_FIRST_COMPAT = ['ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ',
                 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
                 'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ',
                 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ']


#########
# types #
#########
class Choseong(namedtuple('Choseong', ['code', 'compatibility_value'])):
    """
    초성. 자모 영역의 코드와 호환 영역 문자
    """
    __slots__ = ()

    def __new__(cls, code: int):
        """
        Args:
            code:  초성 자모 코드 (U+1100 ~ U+1112)
        """
        assert CHOSEONG_FIRST <= code <= CHOSEONG_LAST, \
               '초성 자모가 아닙니다: U+{:04X}'.format(code)
        return super().__new__(cls, code, _FIRST_COMPAT[code - CHOSEONG_FIRST])

    def __str__(self):
        return self.compatibility_value
