import logging

from config.settings import LOG_LEVEL
from ui.main_window import MainWindow


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    MainWindow().run()


if __name__ == "__main__":
    main()
