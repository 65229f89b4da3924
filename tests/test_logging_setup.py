import logging
import os
import sys

path_to_source_modules=os.path.abspath(os.path.join(os.path.dirname(__file__), '../src'))
sys.path.insert(0, path_to_source_modules)
from directory_map import DirectoryMap, set_up_logging

from .utils.misc import current_test_name, read_file


def test_set_up_logging_writes_log_files(scratch_dir):
    info_log = os.path.join(scratch_dir, 'dm.info.log')
    debug_log = os.path.join(scratch_dir, 'dm.debug.log')
    data_dir = os.path.join(scratch_dir, 'data')
    os.mkdir(data_dir)
    logger = set_up_logging(f'tests.{current_test_name()}', info_log_path=info_log, debug_log_path=debug_log)
    try:
        with DirectoryMap('create', data_dir, logger=logger) as dm:
            dm.set('a.txt', 'hello')
        for handler in logger.handlers:
            handler.flush()
        assert 'bound to' in read_file(info_log)
        debug_text = read_file(debug_log)
        assert 'set "' in debug_text
        assert 'DEBUG' in debug_text
        assert 'set "' not in read_file(info_log)
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

def test_set_up_logging_is_idempotent():
    name = f'tests.{current_test_name()}'
    logger = set_up_logging(name)
    try:
        handler_count = len(logger.handlers)
        assert handler_count == 2
        assert set_up_logging(name) is logger
        assert len(logger.handlers) == handler_count
        assert logger.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
