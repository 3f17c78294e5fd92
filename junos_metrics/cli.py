"""
CLI интерфейс для junos_metrics.

Примеры использования:
    # Однократный сбор в текстовом формате Prometheus
    python -m junos_metrics collect mx1.example.net

    # Только BGP и интерфейсы, без аварий вентиляторов, в JSON файл
    python -m junos_metrics collect 10.0.0.1 10.0.0.2 \\
        --features bgp,interfaces --alarm-filter "fan" --format json --output metrics

    # Список доменов и их метрик
    python -m junos_metrics features
"""

import sys
import argparse
import logging
from typing import List, Optional

from .core.exceptions import ConfigError, JunosMetricsError, format_error_for_log

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="junos-metrics",
        description="Сбор телеметрии Junos (Scrapli + XML) в формате Prometheus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s collect mx1.example.net
  %(prog)s collect 10.0.0.1 --features bgp,routes --format json
  %(prog)s features
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к config.yaml (default: поиск в текущей папке)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Логи в JSON формате",
    )

    subparsers = parser.add_subparsers(dest="command", help="Команды")

    collect_parser = subparsers.add_parser("collect", help="Однократный сбор метрик")
    collect_parser.add_argument(
        "hosts",
        nargs="*",
        help="Устройства (default: секция devices в config.yaml)",
    )
    collect_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="SSH порт (default: connection.port из конфига)",
    )
    collect_parser.add_argument(
        "--alarm-filter",
        default=None,
        help="Regex: аварии с совпадением в описании или типе не считаются",
    )
    collect_parser.add_argument(
        "--features",
        default=None,
        help="Домены через запятую (default: включённые в конфиге)",
    )
    collect_parser.add_argument(
        "-f",
        "--format",
        choices=["prometheus", "json"],
        default=None,
        help="Формат вывода (default: exporter.default_format)",
    )
    collect_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Папка для файла (default: вывод в stdout)",
    )
    collect_parser.add_argument(
        "--workers",
        type=int,
        default=5,
        help="Параллельных подключений (default: 5)",
    )
    collect_parser.add_argument(
        "--debug-rpc",
        action="store_true",
        help="Логировать сырые XML ответы",
    )

    subparsers.add_parser("features", help="Список доменов и их метрик")

    return parser


def _parse_features(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]


def load_devices(args, config) -> List:
    """
    Формирует список устройств из аргументов или конфига.

    Raises:
        ConfigError: Нет ни одного устройства
    """
    from .core.device import Device

    port = args.port or config.connection.port
    if args.hosts:
        return [Device(host=host, port=port) for host in args.hosts]

    devices = [
        Device(host=d.host, port=d.port or port, platform=d.platform)
        for d in config.devices
    ]
    if not devices:
        raise ConfigError("Не указано ни одного устройства", key="devices")
    return devices


def cmd_collect(args, config) -> int:
    """Обработчик команды collect."""
    from .core.connection import ConnectionManager
    from .core.credentials import CredentialsManager
    from .core.scrape import ScrapeExecutor, scrape_devices
    from .exporters import get_exporter

    features = _parse_features(args.features) or config.features.enabled()
    alarm_filter = args.alarm_filter or config.exporter.alarm_filter

    executor = ScrapeExecutor(
        features=features,
        alarm_filter=alarm_filter,
        debug=args.debug_rpc or config.exporter.debug,
    )
    devices = load_devices(args, config)
    credentials = CredentialsManager().get_credentials(interactive=sys.stdin.isatty())

    manager = ConnectionManager(
        timeout_socket=config.connection.timeout_socket,
        timeout_transport=config.connection.timeout_transport,
        timeout_ops=config.connection.timeout_ops,
        transport=config.connection.transport,
    )

    results = scrape_devices(devices, credentials, executor, manager, max_workers=args.workers)

    metrics = []
    for result in results:
        metrics.extend(result.metrics)

    fmt = args.format or config.exporter.default_format
    exporter = get_exporter(fmt, output_folder=args.output or config.exporter.output_folder)

    if args.output:
        exporter.export(metrics)
    else:
        sys.stdout.write(exporter.render(metrics))

    down = [r.target for r in results if not r.up]
    if down:
        logger.warning(f"Недоступны: {', '.join(down)}")
    failed = [r.target for r in results if r.up and r.errors]
    if failed:
        logger.warning(f"Ошибки коллекторов: {', '.join(failed)}")
    return 1 if down or failed else 0


def cmd_features(args, config) -> int:
    """Обработчик команды features."""
    from .core.scrape import FEATURES

    enabled = set(config.features.enabled())
    for name, collector_class in FEATURES.items():
        collector = collector_class()
        mark = "+" if name in enabled else "-"
        print(f"[{mark}] {name}")
        for desc in collector.describe():
            print(f"      {desc.name}{{{','.join(desc.label_names)}}}")
    return 0


def setup_cli_logging(args, config) -> None:
    """Логирование: -v и --json-logs перекрывают config.yaml."""
    from .core.logging import LogConfig, setup_logging

    log_config = LogConfig.from_dict(config.logging.model_dump())
    if args.verbose:
        log_config.level = logging.DEBUG

    if args.json_logs:
        log_config.json_format = True
    setup_logging(log_config)


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция CLI."""
    from .config import load_config

    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
    except ConfigError as e:
        sys.stderr.write(f"{format_error_for_log(e)}\n")
        return 2

    setup_cli_logging(args, config)

    try:
        if args.command == "collect":
            return cmd_collect(args, config)
        if args.command == "features":
            return cmd_features(args, config)
    except ConfigError as e:
        logger.error(format_error_for_log(e))
        return 2
    except JunosMetricsError as e:
        logger.error(format_error_for_log(e))
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
