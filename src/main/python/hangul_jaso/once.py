# -*- coding: utf-8 -*-


"""
한 번만 초기화되는 값 보관 객체
__author__ = 'hangul_jaso developers'
__copyright__ = 'Copyright (C) 2026-, hangul_jaso developers. All rights reserved.'
"""


###########
# imports #
###########
from threading import Lock
from typing import Any, Callable


#############
# variables #
#############
_UNSET = object()


#########
# types #
#########
class OnceCell:
    """
    여러 스레드가 동시에 처음 접근해도 초기화 함수는 한 번만 수행되고
    모든 스레드가 같은 값을 보게 된다.
    """
    __slots__ = ('_lock', '_value')

    def __init__(self):
        self._lock = Lock()
        self._value = _UNSET

    def is_set(self) -> bool:
        """
        초기화 여부
        """
        return self._value is not _UNSET

    def get_or_init(self, init: Callable[[], Any]) -> Any:
        """
        값이 있으면 그대로, 없으면 초기화 함수로 값을 만들어 저장한 뒤 돌려준다.
        Args:
            init:  초기화 함수
        Returns:
            저장된 값
        """
        value = self._value
        if value is not _UNSET:
            return value
        with self._lock:
            if self._value is _UNSET:
                self._value = init()
            return self._value
