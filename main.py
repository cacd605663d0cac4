# Main.py
""""" Entry point for the calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Configure logging, load configuration and start the Qt GUI
   - Open a share link / expression given on the command line

   Usage:
       python main.py
       python main.py "calculator://open?q=2%2B3"
"""""
import logging
import sys
from pathlib import Path

from calculator import UI, config_manager
from calculator.share import expression_from_link

logger = logging.getLogger(__name__)


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) the files are embedded by the bundler and this check is skipped.
    """

    package_dir = PROJECT_ROOT / "calculator"

    REQUIRED = [
        package_dir / "UI.py",
        package_dir / "MathEngine.py",
        package_dir / "Tokenizer.py",
        package_dir / "ShuntingYard.py",
        package_dir / "Evaluator.py",
        package_dir / "ScientificEngine.py",
        package_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
        PROJECT_ROOT / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def configure_logging(settings):
    level = logging.DEBUG if settings.get("debug") == True else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(argv=None):

    """
    Load configuration and start the GUI.
    - Keep this thin: no business logic here.
    """
    argv = sys.argv[1:] if argv is None else argv

    all_settings = config_manager.load_setting_value("all")
    configure_logging(all_settings)
    logger.debug("Config loaded: %s", all_settings)

    initial_expression = expression_from_link(argv[0]) if argv else None

    # Delegate control to the UI layer; the UI owns the event loop.
    UI.main(initial_expression)


if __name__ == "__main__":
    if not getattr(sys, 'frozen', False):
        check_files_exist()
    main()
