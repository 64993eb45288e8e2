# -*- coding: utf-8 -*-


"""
한글 음절 하나를 초성, 중성, 종성으로 파싱하는 모듈.
완성형(NFC) 문자 하나 혹은 조합형(NFD) 자모열 2~3 글자를 입력으로 받는다.
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from enum import Enum
from typing import List, Optional, Tuple

from hangul_jaso.errors import HangulJasoExcept
from hangul_jaso.jamo import Choseong, Jongseong, Jungseong
from hangul_jaso.norm import nfd
from hangul_jaso.norm.nfc import is_nfc_hangul, is_nfc_hangul_char


#########
# types #
#########
class Origin(Enum):
    """
    음절을 파싱한 원문의 정규형
    """
    NFC = 'nfc'    # 완성형 문자 하나
    NFD = 'nfd'    # 초성, 중성, (종성) 자모열


class HangulLetter:
    """
    한글 음절. 파싱 이후에는 변경되지 않는다.
    """
    __slots__ = ('_value_chars', '_unicode_codes', '_origin', '_choseong', '_jungseong',
                 '_jongseong')

    def __init__(self, value_chars: str, origin: Origin, choseong: Choseong,
                 jungseong: Jungseong, jongseong: Optional[Jongseong] = None):
        """
        직접 생성하지 말고 parse(), parse_from_char() 메소드를 사용한다.
        Args:
            value_chars:  원문 문자열 (NFC는 1글자, NFD는 2~3글자)
            origin:  원문의 정규형
            choseong:  초성
            jungseong:  중성
            jongseong:  종성 (없을 경우 None)
        """
        if origin is Origin.NFC:
            assert len(value_chars) == 1
        else:
            assert len(value_chars) == (3 if jongseong else 2)
        fields = {'_value_chars': value_chars,
                  '_unicode_codes': tuple(ord(char) for char in value_chars),
                  '_origin': origin, '_choseong': choseong, '_jungseong': jungseong,
                  '_jongseong': jongseong}
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError('HangulLetter is immutable')

    def __delattr__(self, name):
        raise AttributeError('HangulLetter is immutable')

    def __str__(self):
        return self._value_chars

    def __repr__(self):
        return 'HangulLetter({!r}, {})'.format(self._value_chars, self._origin.name)

    def __len__(self):
        return len(self._value_chars)

    @classmethod
    def parse_from_char(cls, char: str) -> Optional['HangulLetter']:
        """
        완성형 한글 문자 하나를 파싱한다.
        Args:
            char:  문자
        Returns:
            한글 음절. 완성형 한글 문자 하나가 아니면 None
        """
        if not isinstance(char, str):
            raise HangulJasoExcept('char must be str, not {}'.format(type(char).__name__))
        if len(char) != 1 or not is_nfc_hangul_char(char):
            return None
        return cls._from_nfc(char)

    @classmethod
    def parse(cls, text: str) -> Optional['HangulLetter']:
        """
        완성형 한글 문자 하나 혹은 NFD 자모열을 파싱한다.
        Args:
            text:  문자열
        Returns:
            한글 음절. 한 음절이 아니면 None
        """
        if not isinstance(text, str):
            raise HangulJasoExcept('text must be str, not {}'.format(type(text).__name__))
        if len(text) == 1 and is_nfc_hangul(text):
            return cls._from_nfc(text)
        if nfd.is_nfd_hangul(text):
            jongseong = Jongseong(ord(text[2])) if len(text) == 3 else None
            return cls(text, Origin.NFD, Choseong(ord(text[0])), Jungseong(ord(text[1])),
                       jongseong)
        return None

    @classmethod
    def _from_nfc(cls, char: str) -> 'HangulLetter':
        cho, jung, jong = nfd.normalize(ord(char))
        return cls(char, Origin.NFC, Choseong(cho), Jungseong(jung),
                   Jongseong(jong) if jong else None)

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def value_chars(self) -> str:
        return self._value_chars

    @property
    def unicode_codes(self) -> Tuple[int, ...]:
        return self._unicode_codes

    @property
    def value_nfc(self) -> Optional[str]:
        """
        완성형 문자. NFD 자모열에서 파싱한 경우 None
        """
        return self._value_chars if self._origin is Origin.NFC else None

    @property
    def choseong(self) -> Choseong:
        return self._choseong

    @property
    def jungseong(self) -> Jungseong:
        return self._jungseong

    @property
    def jongseong(self) -> Optional[Jongseong]:
        return self._jongseong

    def value_string(self) -> str:
        """
        원문 문자열
        """
        return self._value_chars

    def has_batchim(self) -> bool:
        """
        받침(종성) 유무
        Returns:
            받침이 있으면 True
        """
        return self._jongseong is not None

    def append_disassembled(self, output: List[str]):
        """
        호환 영역 자모로 분해한 문자들을 출력 버퍼에 덧붙인다.
        Args:
            output:  출력 버퍼
        """
        output.append(self._choseong.compatibility_value)
        output.append(self._jungseong.compatibility_value)
        if self._jongseong is not None:
            self._jongseong.append_disassembled(output)

    def disassemble(self) -> str:
        """
        호환 영역 자모로 분해한다. 겹받침은 두 글자로 나뉜다.
        Returns:
            2~4 글자의 분해된 문자열
        """
        output = []
        self.append_disassembled(output)
        return ''.join(output)
