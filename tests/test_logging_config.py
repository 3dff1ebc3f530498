import logging

import league_tables


def test_configure_logging_quiets_http_clients():
    logging.getLogger("urllib3").setLevel(logging.DEBUG)
    logging.getLogger("requests").setLevel(logging.DEBUG)

    league_tables.configure_logging("debug")

    assert logging.getLogger("urllib3").level == logging.WARNING
    assert logging.getLogger("requests").level == logging.WARNING


def test_configure_logging_keeps_existing_root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)

    league_tables.configure_logging()

    assert root.handlers == before
