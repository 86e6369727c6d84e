import logging


def pytest_addoption(parser):
    parser.addoption("--show-logging", action="store_true", default=False, help="Don't silence application logging")


def pytest_configure(config):
    if not config.option.show_logging:
        logging.getLogger("menumanager").setLevel(logging.CRITICAL)
