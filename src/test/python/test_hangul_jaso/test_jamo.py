#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
choseong/jungseong/jongseong lookup tests
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
import unicodedata
import unittest

from hangul_jaso.jamo import Choseong, Jongseong, Jungseong    # pylint: disable=import-error


#########
# tests #
#########
class TestJamo(unittest.TestCase):
    """
    jamo lookup tests
    """
    def test_choseong(self):
        """
        test all choseong against NFKC compatibility mapping
        """
        values = ''.join(Choseong(code).compatibility_value for code in range(0x1100, 0x1113))
        self.assertEqual(values, 'ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ')
        for code in range(0x1100, 0x1113):
            compat = Choseong(code).compatibility_value
            self.assertEqual(unicodedata.normalize('NFKC', compat), chr(code))
        self.assertEqual(str(Choseong(0x1112)), 'ㅎ')
        self.assertEqual(Choseong(0x1100), Choseong(0x1100))

    def test_jungseong(self):
        """
        test all jungseong
        """
        values = ''.join(Jungseong(code).compatibility_value for code in range(0x1161, 0x1176))
        self.assertEqual(values, 'ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ')
        for code in range(0x1161, 0x1176):
            compat = Jungseong(code).compatibility_value
            self.assertEqual(unicodedata.normalize('NFKC', compat), chr(code))

    def test_jongseong(self):
        """
        test all jongseong and composite splitting
        """
        jongs = [Jongseong(code) for code in range(0x11A8, 0x11C3)]
        self.assertEqual(''.join(j.compatibility_value for j in jongs),
                         'ㄱㄲㄳㄴㄵㄶㄷㄹㄺㄻㄼㄽㄾㄿㅀㅁㅂㅄㅅㅆㅇㅈㅊㅋㅌㅍㅎ')
        composites = {j.compatibility_value: j.disassembled for j in jongs if j.is_composite}
        self.assertEqual(composites, {'ㄳ': 'ㄱㅅ', 'ㄵ': 'ㄴㅈ', 'ㄶ': 'ㄴㅎ', 'ㄺ': 'ㄹㄱ',
                                      'ㄻ': 'ㄹㅁ', 'ㄼ': 'ㄹㅂ', 'ㄽ': 'ㄹㅅ', 'ㄾ': 'ㄹㅌ',
                                      'ㄿ': 'ㄹㅍ', 'ㅀ': 'ㄹㅎ', 'ㅄ': 'ㅂㅅ'})
        for jong in jongs:
            if not jong.is_composite:
                self.assertEqual(jong.disassembled, jong.compatibility_value)

    def test_append_disassembled(self):
        """
        test that a composite jongseong appends two chars
        """
        output = ['ㄱ', 'ㅏ']
        Jongseong(0x11B9).append_disassembled(output)
        self.assertEqual(output, ['ㄱ', 'ㅏ', 'ㅂ', 'ㅅ'])
        output = []
        Jongseong(0x11A9).append_disassembled(output)
        self.assertEqual(output, ['ㄲ'])

    def test_out_of_range(self):
        """
        test that out-of-range codes are internal errors
        """
        with self.assertRaises(AssertionError):
            Choseong(0x1113)
        with self.assertRaises(AssertionError):
            Jungseong(0x1160)
        with self.assertRaises(AssertionError):
            Jongseong(0x11A7)


if __name__ == '__main__':
    unittest.main()
