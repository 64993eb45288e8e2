# -*- coding: utf-8 -*-


"""
초성, 중성, 종성 자모와 호환 영역 자모의 대응
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from hangul_jaso.jamo.choseong import Choseong
from hangul_jaso.jamo.jongseong import Jongseong
from hangul_jaso.jamo.jungseong import Jungseong
