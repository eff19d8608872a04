"""
Сравнение периодов действия записей ГАР
"""
from datetime import date
from typing import Optional


class ActualityComparator:
    """
    Определяет, какой из двух периодов действия актуальнее.

    Бессрочный или более поздний конец периода актуальнее. При равном конце
    актуальнее период, начавшийся позже (последняя заменившая версия).
    Отсутствующее начало считается самым ранним.
    """

    def compare(
        self,
        a_start: Optional[date],
        a_end: Optional[date],
        b_start: Optional[date],
        b_end: Optional[date],
    ) -> int:
        """-1 если период A менее актуален чем B, 0 если равны, 1 если A актуальнее"""
        res = self._compare_ends(a_end, b_end)
        if res != 0:
            return res
        return self._compare_starts(a_start, b_start)

    @staticmethod
    def _compare_ends(a: Optional[date], b: Optional[date]) -> int:
        if a == b:
            return 0
        if a is None:
            return 1
        if b is None:
            return -1
        return 1 if a > b else -1

    @staticmethod
    def _compare_starts(a: Optional[date], b: Optional[date]) -> int:
        if a == b:
            return 0
        if a is None:
            return -1
        if b is None:
            return 1
        return 1 if a > b else -1
