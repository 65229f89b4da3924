import logging
import sys
from typing import Union

INFO_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s in %(funcName)s at %(filename)s:%(lineno)s'


def set_up_logging(name: str = 'directory_map',
                   info_log_path: Union[str,None] = None,
                   debug_log_path: Union[str,None] = None) -> logging.Logger:
    """
        Attach the usual handlers to the named logger:  optional INFO and DEBUG log files,
        INFO and up to stdout, ERROR and up to stderr.
        Calling it again for the same logger does not stack up duplicate handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if getattr(logger, '_directory_map_configured', False):
        return logger

    if info_log_path:
        info_fh = logging.FileHandler(info_log_path)
        info_fh.setLevel(logging.INFO)
        info_fh.setFormatter(logging.Formatter(INFO_FORMAT))
        logger.addHandler(info_fh)

    if debug_log_path:
        debug_fh = logging.FileHandler(debug_log_path)
        debug_fh.setLevel(logging.DEBUG)
        debug_fh.setFormatter(logging.Formatter(DEBUG_FORMAT))
        logger.addHandler(debug_fh)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.ERROR)
    err_handler.setFormatter(logging.Formatter(INFO_FORMAT))

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.setLevel(logging.INFO)
    # errors already go to stderr
    out_handler.addFilter(lambda record: record.levelno < logging.ERROR)
    out_handler.setFormatter(logging.Formatter(INFO_FORMAT))

    logger.addHandler(err_handler)
    logger.addHandler(out_handler)
    setattr(logger, '_directory_map_configured', True)
    return logger
