# -*- coding: utf-8 -*-


"""
예외 클래스
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


#########
# types #
#########
class HangulJasoExcept(Exception):
    """
    hangul_jaso API를 위한 표준 예외 클래스
    """
