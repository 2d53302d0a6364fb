import logging

from handtrack.core.logger import get_logger, setup_logging


def test_module_loggers_share_package_root():
    assert get_logger().name == 'handtrack'
    assert get_logger('handtrack.solver.hand').name == 'handtrack.solver.hand'
    assert get_logger('tools').name == 'handtrack.tools'


def test_setup_logging_to_file(tmp_path):
    log_path = tmp_path / 'logs' / 'run.log'
    logger = setup_logging(debug=True, log_to_file=True, log_path=log_path)
    try:
        get_logger('handtrack.solver.search').debug('walked')
        for handler in logger.handlers:
            handler.flush()
        assert logger.level == logging.DEBUG
        assert 'walked' in log_path.read_text(encoding='utf-8')
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
