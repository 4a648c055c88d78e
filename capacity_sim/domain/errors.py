"""
Иерархия ошибок модели ёмкости.  Всё, что бросает ядро, наследуется от
CapacityModelError — вызывающему коду достаточно одного except.
"""


class CapacityModelError(Exception):
    """Базовый класс ошибок ядра."""


class InvalidConfiguration(CapacityModelError, ValueError):
    """Параметры модели или прогона вне допустимого диапазона."""


class InvalidInput(CapacityModelError, ValueError):
    """Неверный аргумент операции (delta_time ≤ 0, битый сегмент расписания)."""


class LengthMismatch(CapacityModelError):
    """Golden- и live-траектории разной длины — баг в расписании."""

    def __init__(self, golden: int, live: int) -> None:
        super().__init__(f"Data length mismatch: golden ({golden}) vs live ({live})")
        self.golden = golden
        self.live = live


class EmptyHistory(CapacityModelError):
    """Сводку/статистику запросили до первого тика."""
