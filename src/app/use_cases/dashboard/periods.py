"""Calendar windows for dashboard aggregates"""

from datetime import date
from typing import List, Optional, Tuple
from .dtos import RevenuePeriod


def period_start(period: RevenuePeriod, today: date) -> Optional[date]:
    """First day of the current month, quarter or year; None for all time"""
    if period == RevenuePeriod.MONTH:
        return today.replace(day=1)
    if period == RevenuePeriod.QUARTER:
        return date(today.year, 3 * ((today.month - 1) // 3) + 1, 1)
    if period == RevenuePeriod.YEAR:
        return date(today.year, 1, 1)
    return None


def month_index(year: int, month: int) -> int:
    return year * 12 + month - 1


def trailing_months(today: date, months: int) -> List[Tuple[int, int]]:
    """(year, month) pairs for the last ``months`` months, oldest first, ending with today's"""
    last = month_index(today.year, today.month)
    return [(index // 12, index % 12 + 1) for index in range(last - months + 1, last + 1)]
