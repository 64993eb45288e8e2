# -*- coding: utf-8 -*-


"""
한글 자소 분해 라이브러리
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from hangul_jaso.errors import HangulJasoExcept
from hangul_jaso.hangul import CharUnit, Hangul, disassemble, get_choseong
from hangul_jaso.hangul_letter import HangulLetter, Origin
from hangul_jaso.jamo import Choseong, Jongseong, Jungseong


#############
# variables #
#############
__version__ = '0.1.0'
