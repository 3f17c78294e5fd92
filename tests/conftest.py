"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- load_fixture: Загрузка XML ответов Junos из файлов
- fixture_channel: Канал команд, отвечающий содержимым fixtures
- FakeChannel: Канал с заданными ответами для тестов RpcClient
"""

import pytest
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

FIXTURES_DIR = Path(__file__).parent / "fixtures"
JUNOS_PLATFORM = "juniper_junos"
XML_SUFFIX = " | display xml"


def fixture_name_for(command: str) -> str:
    """'show chassis routing-engine | display xml' → 'show_chassis_routing_engine.xml'."""
    base = command[: -len(XML_SUFFIX)] if command.endswith(XML_SUFFIX) else command
    return base.replace("-", "_").replace(" ", "_") + ".xml"


class FakeChannel:
    """
    CommandChannel для тестов.

    Args:
        responses: команда (без суффикса) → ответ или исключение
        default: Ответ для неизвестных команд (None — KeyError)
    """

    def __init__(
        self,
        responses: Optional[Dict[str, Union[bytes, str, Exception]]] = None,
        default: Optional[Callable[[str], bytes]] = None,
        host: str = "mx1",
    ):
        self.responses = responses or {}
        self.default = default
        self.host = host
        self.commands: List[str] = []

    def run_command(self, command: str) -> bytes:
        self.commands.append(command)
        key = command[: -len(XML_SUFFIX)] if command.endswith(XML_SUFFIX) else command

        if key in self.responses:
            response = self.responses[key]
        elif self.default is not None:
            response = self.default(command)
        else:
            raise KeyError(command)

        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return response.encode("utf-8")
        return response


def read_fixture(platform: str, filename: str) -> str:
    return (FIXTURES_DIR / platform / filename).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    """Возвращает путь к директории fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture(fixtures_dir):
    """
    Fixture для загрузки тестовых данных из файлов.

    Usage:
        output = load_fixture("juniper_junos", "show_bgp_summary.xml")
    """
    def _load(platform: str, filename: str) -> str:
        fixture_path = fixtures_dir / platform / filename
        if not fixture_path.exists():
            pytest.skip(f"Fixture не найден: {fixture_path}")
        return fixture_path.read_text(encoding="utf-8")
    return _load


@pytest.fixture
def fixture_channel():
    """Канал, который отвечает на каждую команду файлом из fixtures/juniper_junos."""
    def _default(command: str) -> bytes:
        return read_fixture(JUNOS_PLATFORM, fixture_name_for(command)).encode("utf-8")
    return FakeChannel(default=_default)


@pytest.fixture
def make_channel():
    """Фабрика FakeChannel с заданными ответами."""
    def _make(responses=None, host: str = "mx1") -> FakeChannel:
        return FakeChannel(responses=responses, host=host)
    return _make
