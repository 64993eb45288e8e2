# -*- coding: utf-8 -*-


"""
완성형(NFC) 한글 음절 판별 모듈
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


#############
# constants #
#############
SYLLABLE_FIRST = 0xAC00    # 가
SYLLABLE_LAST = 0xD7A3    # 힣


#############
# functions #
#############
def is_nfc_hangul_char(char: str) -> bool:
    """
    문자 하나가 완성형 한글 음절인지 여부
    Args:
        char:  문자
    Returns:
        완성형 한글 음절 여부
    """
    return SYLLABLE_FIRST <= ord(char) <= SYLLABLE_LAST


def is_nfc_hangul(text: str) -> bool:
    """
    문자열의 첫 문자가 완성형 한글 음절인지 여부. 빈 문자열은 False
    Args:
        text:  문자열
    Returns:
        첫 문자의 완성형 한글 음절 여부
    """
    return bool(text) and is_nfc_hangul_char(text[0])
