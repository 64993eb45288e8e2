# -*- coding: utf-8 -*-


"""
조합형(NFD) 한글 자모열 판별과 완성형 음절의 자모 분해
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from collections import namedtuple

from hangul_jaso.norm.nfc import SYLLABLE_FIRST, SYLLABLE_LAST


#############
# constants #
#############
# 한글 자모 영역 (초성과 종성이 다름)
CHOSEONG_FIRST = 0x1100
CHOSEONG_LAST = 0x1112
JUNGSEONG_FIRST = 0x1161
JUNGSEONG_LAST = 0x1175
JONGSEONG_FIRST = 0x11A8
JONGSEONG_LAST = 0x11C2

_JUNGSEONG_COUNT = 21
_JONGSEONG_COUNT = 28    # 종성 없음 포함
_JONGSEONG_BASE = JONGSEONG_FIRST - 1


#########
# types #
#########
Nfd = namedtuple('Nfd', ['choseong', 'jungseong', 'jongseong'])


#############
# functions #
#############
def is_choseong(char: str) -> bool:
    """
    초성 자모 여부
    """
    return CHOSEONG_FIRST <= ord(char) <= CHOSEONG_LAST


def is_jungseong(char: str) -> bool:
    """
    중성 자모 여부
    """
    return JUNGSEONG_FIRST <= ord(char) <= JUNGSEONG_LAST


def is_jongseong(char: str) -> bool:
    """
    종성 자모 여부
    """
    return JONGSEONG_FIRST <= ord(char) <= JONGSEONG_LAST


def is_nfd_hangul(text: str) -> bool:
    """
    문자열 전체가 초성+중성 혹은 초성+중성+종성으로 이루어진 자모열인지 여부
    Args:
        text:  문자열
    Returns:
        NFD 한글 음절 여부
    """
    if len(text) not in (2, 3):
        return False
    if not is_choseong(text[0]) or not is_jungseong(text[1]):
        return False
    return len(text) == 2 or is_jongseong(text[2])


def normalize(code: int) -> Nfd:
    """
    완성형 한글 음절 코드를 초성, 중성, 종성 자모 코드로 분해한다.
    Args:
        code:  완성형 한글 음절 코드
    Returns:
        (초성, 중성, 종성) 코드. 종성이 없으면 종성은 None
    """
    assert SYLLABLE_FIRST <= code <= SYLLABLE_LAST, \
           '자소 분해가 가능한 한글 영역이 아닙니다: U+{:04X}'.format(code)

    idx = code - SYLLABLE_FIRST
    first_idx = idx // (_JUNGSEONG_COUNT * _JONGSEONG_COUNT)
    middle_idx = (idx // _JONGSEONG_COUNT) % _JUNGSEONG_COUNT
    last_idx = idx % _JONGSEONG_COUNT

    last = _JONGSEONG_BASE + last_idx if last_idx else None
    return Nfd(CHOSEONG_FIRST + first_idx, JUNGSEONG_FIRST + middle_idx, last)
