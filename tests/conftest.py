# conftest.py
import os
import sys
import tempfile
import pytest
import dotenv

path_to_source_modules=os.path.abspath(os.path.join(os.path.dirname(__file__), '../src'))
sys.path.insert(0, path_to_source_modules)

from .utils.misc import populate_directory
from .utils.persistent_temporary_directory import PersistentTemporaryDirectory


def pytest_configure():
    dotenv.load_dotenv()

scratch_root_env_var = 'TEST_DIRECTORY_MAP_ROOT'
keep_scratch_env_var = 'TEST_KEEP_SCRATCH_DIRS'

sample_files:dict[str,str] = {
    'a.txt': 'hello',
    'b.txt': 'content of b.txt',
    'empty': '',
    'subdir/inner.txt': 'content of subdir/inner.txt',
}

@pytest.fixture
def scratch_dir():
    scratch_root = os.environ.get(scratch_root_env_var) or None
    if os.environ.get(keep_scratch_env_var):
        with PersistentTemporaryDirectory(dir=scratch_root) as temp_dir:
            yield temp_dir
    else:
        with tempfile.TemporaryDirectory(dir=scratch_root) as temp_dir:
            yield temp_dir

@pytest.fixture
def populated_dir(scratch_dir):
    """
        a.txt, b.txt, empty           regular files
        subdir/                       directory holding inner.txt
        link_to_file -> a.txt         symlink to a regular file
        link_to_dir -> subdir         symlink to a directory
        dangling -> nowhere           symlink to nothing
    """
    populate_directory(scratch_dir, sample_files)
    os.symlink('a.txt', os.path.join(scratch_dir, 'link_to_file'))
    os.symlink('subdir', os.path.join(scratch_dir, 'link_to_dir'))
    os.symlink('nowhere', os.path.join(scratch_dir, 'dangling'))
    yield scratch_dir
