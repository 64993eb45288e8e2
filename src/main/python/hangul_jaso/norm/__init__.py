# -*- coding: utf-8 -*-


"""
유니코드 한글 정규형(NFC, NFD) 판별 및 분해 모듈
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""
