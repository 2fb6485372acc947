"""Главный файл запуска дашборда плотности СУГ."""

import sys
from pathlib import Path

# Добавляем src в путь
src_path = Path(__file__).parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dotenv import load_dotenv

from lpg_density.config import DashboardSettings
from lpg_density.console import HELP_TEXT, QuitRequested, handle_command, render_status
from lpg_density.dashboard import DensityDashboard
from lpg_density.logging import setup_logging
from lpg_density.storage import JsonFileStorage, StateRepository

# Загрузка переменных окружения
load_dotenv()


def create_dashboard(settings: DashboardSettings) -> DensityDashboard:
    """
    Создание дашборда с файловым хранилищем состояния.

    Args:
        settings: Настройки окружения

    Returns:
        Настроенный DensityDashboard
    """
    storage = JsonFileStorage(settings.state_path)
    return DensityDashboard(StateRepository(storage), chart_samples=settings.chart_samples)


def main_interactive(settings: DashboardSettings) -> None:
    """Главная функция в режиме ожидания команд пользователя."""
    dashboard = create_dashboard(settings)

    print("\nПлотность пропана и бутана")
    print("Введите help для списка команд\n")
    print(render_status(dashboard))
    print()

    try:
        while True:
            line = input("> ").strip()
            if not line:
                continue

            try:
                print(handle_command(dashboard, line))
            except QuitRequested:
                break
            print()
    except (KeyboardInterrupt, EOFError):
        print("\n\nЗавершение работы...")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Плотность жидкого пропана, бутана и смеси",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_TEXT,
    )
    parser.add_argument(
        "--state-dir",
        help="Директория для сохранения состояния (по умолчанию LPG_STATE_DIR или data/state)",
    )
    args = parser.parse_args()

    settings = DashboardSettings.from_env()
    if args.state_dir:
        settings.state_dir = args.state_dir

    setup_logging(
        settings.log_level,
        enable_file_logging=settings.enable_file_logging,
        logs_dir=settings.logs_dir,
    )

    main_interactive(settings)
