"""Order id sequence — монотонный счётчик номеров заказов."""

import threading


class OrderIdSequence:
    """Монотонный счётчик, начинается с start (по умолчанию 1).

    Номера никогда не переиспользуются, в том числе для отклонённых заказов.
    Инкремент защищён собственным lock.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError(f"start {start} must be >= 1")
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Следующий номер."""
        with self._lock:
            number = self._next
            self._next += 1
        return number

    @property
    def peek(self) -> int:
        """Номер, который будет выдан следующим (без инкремента)."""
        with self._lock:
            return self._next


# Process-wide sequence for ledgers created without an explicit one
DEFAULT_SEQUENCE = OrderIdSequence()
