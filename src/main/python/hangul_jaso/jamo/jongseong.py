# -*- coding: utf-8 -*-


"""
종성(받침). 겹받침은 호환 영역 문자 하나로 표현되지만 분해하면 두 글자가 된다.
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from collections import namedtuple
from typing import List

from hangul_jaso.norm.nfd import JONGSEONG_FIRST, JONGSEONG_LAST


#############
# constants #
#############
# U+11A8 ~ U+11C2 순서의 (호환 영역 문자, 분해된 문자열)
_LAST_COMPAT = [('ㄱ', 'ㄱ'), ('ㄲ', 'ㄲ'), ('ㄳ', 'ㄱㅅ'), ('ㄴ', 'ㄴ'), ('ㄵ', 'ㄴㅈ'),
                ('ㄶ', 'ㄴㅎ'), ('ㄷ', 'ㄷ'), ('ㄹ', 'ㄹ'), ('ㄺ', 'ㄹㄱ'), ('ㄻ', 'ㄹㅁ'),
                ('ㄼ', 'ㄹㅂ'), ('ㄽ', 'ㄹㅅ'), ('ㄾ', 'ㄹㅌ'), ('ㄿ', 'ㄹㅍ'), ('ㅀ', 'ㄹㅎ'),
                ('ㅁ', 'ㅁ'), ('ㅂ', 'ㅂ'), ('ㅄ', 'ㅂㅅ'), ('ㅅ', 'ㅅ'), ('ㅆ', 'ㅆ'),
                ('ㅇ', 'ㅇ'), ('ㅈ', 'ㅈ'), ('ㅊ', 'ㅊ'), ('ㅋ', 'ㅋ'), ('ㅌ', 'ㅌ'),
                ('ㅍ', 'ㅍ'), ('ㅎ', 'ㅎ')]


#########
# types #
#########
class Jongseong(namedtuple('Jongseong', ['code', 'compatibility_value', 'disassembled'])):
    """
    종성
    """
    __slots__ = ()

    def __new__(cls, code: int):
        """
        Args:
            code:  종성 자모 코드 (U+11A8 ~ U+11C2)
        """
        assert JONGSEONG_FIRST <= code <= JONGSEONG_LAST, \
               '종성 자모가 아닙니다: U+{:04X}'.format(code)
        compat, disassembled = _LAST_COMPAT[code - JONGSEONG_FIRST]
        return super().__new__(cls, code, compat, disassembled)

    def __str__(self):
        return self.compatibility_value

    @property
    def is_composite(self) -> bool:
        """
        겹받침 여부
        """
        return len(self.disassembled) == 2

    def append_disassembled(self, output: List[str]):
        """
        분해된 문자(한 글자 혹은 겹받침의 경우 두 글자)를 출력 버퍼에 덧붙인다.
        Args:
            output:  출력 버퍼
        """
        output.extend(self.disassembled)
