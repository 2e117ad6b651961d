"""
Кэш токена сессии.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Блокировка "много читателей или один писатель".

    Пока писатель ждет доступа, новые читатели не допускаются.
    Не реентерабельна.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        """Разделяемый доступ."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Эксклюзивный доступ."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class SessionTokenCache:
    """
    Хранилище одного bearer-токена, общее для всех потоков клиента.

    Токен живет в памяти до сброса (401) или до конца жизни клиента.
    Все изменения идут через write(), все проверки через read().
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._token: str | None = None

    def get(self) -> str | None:
        """Текущий токен или None."""
        with self._lock.read():
            return self._token

    def is_empty(self) -> bool:
        """True если токена нет."""
        with self._lock.read():
            return self._token is None

    def set(self, token: str) -> None:
        """Сохранить токен, заменив предыдущий."""
        with self._lock.write():
            self._token = token

    def clear(self) -> None:
        """Сбросить токен."""
        with self._lock.write():
            self._token = None
