#!/usr/bin/env python

from directory_map import DirectoryMap, AccessDeniedError, set_up_logging

import os
import tempfile

logger = set_up_logging('directory_map_usage')

# Point DATA_DIR at an existing directory to play with real files.
# Without it, everything happens in a throwaway directory.
data_dir = os.environ.get('DATA_DIR')
scratch = None
if not data_dir:
    scratch = tempfile.TemporaryDirectory()
    data_dir = scratch.name

with DirectoryMap('Create', data_dir, logger=logger) as files:
    files.set('a.txt', 'hello')
    logger.info(f'a.txt holds {files.get("a.txt")!r}')
    try:
        files.set('a.txt', 'world')
    except AccessDeniedError as e:
        logger.info(f'as expected: {e}')

with DirectoryMap('Overwrite', data_dir, logger=logger) as files:
    files.set('a.txt', 'world')
    logger.info(f'entries: {sorted(files.keys())}')
    logger.info(f'deleted a.txt which held {files.delete("a.txt")!r}')
    logger.info(f'a.txt is now {files.get("a.txt")!r}')

if scratch:
    scratch.cleanup()
