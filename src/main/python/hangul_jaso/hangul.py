# -*- coding: utf-8 -*-


"""
문자열 단위의 한글 자소 분해 및 초성 추출
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from collections import namedtuple
import logging
from typing import List

from hangul_jaso.errors import HangulJasoExcept
from hangul_jaso.hangul_letter import HangulLetter
from hangul_jaso.once import OnceCell


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#########
# types #
#########
CharUnit = namedtuple('CharUnit', ['original', 'hangul'])    # 원문 문자, HangulLetter 혹은 None


class Hangul:
    """
    한글이 섞인 문자열. 문자 하나마다 완성형 한글 음절 여부를 판별해 둔다.
    NFD 자모열은 음절로 합치지 않고 자모 각각을 그대로 통과시킨다.
    """
    __slots__ = ('_char_units', '_original', '_disassembled_cache', '_choseong_cache')

    def __init__(self, text: str):
        """
        Args:
            text:  입력 문자열
        """
        if not isinstance(text, str):
            raise HangulJasoExcept('text must be str, not {}'.format(type(text).__name__))
        self._char_units = tuple(CharUnit(char, HangulLetter.parse_from_char(char))
                                 for char in text)
        self._original = text
        self._disassembled_cache = OnceCell()
        self._choseong_cache = OnceCell()

    def __str__(self):
        return self._original

    def __repr__(self):
        return 'Hangul({!r})'.format(self._original)

    def __len__(self):
        return len(self._char_units)

    @property
    def original(self) -> str:
        return self._original

    @property
    def char_units(self) -> List[CharUnit]:
        return list(self._char_units)

    def is_empty(self) -> bool:
        return not self._char_units

    def disassemble(self) -> str:
        """
        한글 음절은 호환 영역 자모로 분해하고 나머지 문자는 그대로 둔다.
        Returns:
            분해된 문자열
        """
        return self._disassembled_cache.get_or_init(self._disassemble_uncached)

    def get_choseong(self) -> str:
        """
        한글 음절은 초성만 남기고 나머지 문자는 그대로 둔다.
        Returns:
            초성 문자열
        """
        return self._choseong_cache.get_or_init(self._choseong_uncached)

    def _disassemble_uncached(self) -> str:
        if self.is_empty():
            return ''
        output = []
        for unit in self._char_units:
            if unit.hangul is None:
                output.append(unit.original)
            else:
                unit.hangul.append_disassembled(output)
        _LOG.debug('disassembled %d chars into %d chars', len(self._char_units), len(output))
        return ''.join(output)

    def _choseong_uncached(self) -> str:
        if self.is_empty():
            return ''
        choseong = ''.join(unit.original if unit.hangul is None
                           else unit.hangul.choseong.compatibility_value
                           for unit in self._char_units)
        _LOG.debug('extracted choseong of %d chars', len(self._char_units))
        return choseong


#############
# functions #
#############
def disassemble(text: str) -> str:
    """
    문자열 하나를 바로 분해한다.
    Args:
        text:  입력 문자열
    Returns:
        분해된 문자열
    """
    return Hangul(text).disassemble()


def get_choseong(text: str) -> str:
    """
    문자열 하나의 초성을 바로 추출한다.
    Args:
        text:  입력 문자열
    Returns:
        초성 문자열
    """
    return Hangul(text).get_choseong()
