"""
Модуль управления учётными данными.

Источники логина и пароля:
- Явная передача (CLI/конфиг)
- Переменные окружения
- Интерактивный ввод (getpass)

Пример использования:
    manager = CredentialsManager()
    creds = manager.get_credentials(interactive=False)
"""

import os
import logging
from getpass import getpass
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    """
    Контейнер для учётных данных.

    Attributes:
        username: Имя пользователя
        password: Пароль (может быть пустым при входе по ключу)
        private_key: Путь к приватному SSH ключу (опционально)
    """
    username: str
    password: str = ""
    private_key: Optional[str] = None

    def to_scrapli_params(self) -> dict:
        """Параметры auth_* для Scrapli."""
        result = {
            "auth_username": self.username,
            "auth_password": self.password,
        }
        if self.private_key:
            result["auth_private_key"] = self.private_key
        return result

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


class CredentialsManager:
    """
    Менеджер учётных данных.

    Порядок источников:
    1. Явная передача при создании
    2. Переменные окружения (JUNOS_USERNAME, JUNOS_PASSWORD, JUNOS_SSH_KEY)
    3. Интерактивный ввод через терминал

    Example:
        manager = CredentialsManager(username="netops", password="secret")
        creds = manager.get_credentials()
    """

    ENV_USERNAME = "JUNOS_USERNAME"
    ENV_PASSWORD = "JUNOS_PASSWORD"
    ENV_SSH_KEY = "JUNOS_SSH_KEY"

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        private_key: Optional[str] = None,
    ):
        self._credentials: Optional[Credentials] = None

        if username and (password or private_key):
            self._credentials = Credentials(
                username=username,
                password=password or "",
                private_key=private_key,
            )

    def get_credentials(self, interactive: bool = True) -> Credentials:
        """
        Получает учётные данные.

        Args:
            interactive: Разрешить интерактивный ввод

        Returns:
            Credentials: Объект с учётными данными

        Raises:
            ConfigError: Если не удалось получить credentials
        """
        if self._credentials:
            return self._credentials

        env_username = os.getenv(self.ENV_USERNAME)
        env_password = os.getenv(self.ENV_PASSWORD)
        env_key = os.getenv(self.ENV_SSH_KEY)

        if env_username and (env_password or env_key):
            logger.info("Используем учётные данные из переменных окружения")
            self._credentials = Credentials(
                username=env_username,
                password=env_password or "",
                private_key=env_key,
            )
            return self._credentials

        if interactive:
            logger.info("Запрос учётных данных интерактивно")
            self._credentials = self._prompt_credentials()
            return self._credentials

        raise ConfigError(
            "Не удалось получить учётные данные. "
            f"Установите {self.ENV_USERNAME} и {self.ENV_PASSWORD} "
            "или включите интерактивный режим.",
            key="credentials",
        )

    @staticmethod
    def _prompt_credentials() -> Credentials:
        """Запрашивает учётные данные интерактивно."""
        username = input("Имя пользователя: ").strip()
        password = getpass("Пароль: ")
        return Credentials(username=username, password=password)
