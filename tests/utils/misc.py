
import os
import inspect
from typing import Iterable

def current_test_name() -> str:
    cframe =  inspect.currentframe()
    if cframe and cframe.f_back and cframe.f_back.f_code:
        return cframe.f_back.f_code.co_name
    else:
        return 'no freaking idea what function I am in right now'


def populate_directory(fs_dir_path: str, files: dict[str,str], subdirs: Iterable[str] = ()):
    """ writes files (relative path -> text) and creates the (possibly empty) subdirectories under fs_dir_path """
    for subdir in subdirs:
        os.makedirs(os.path.join(fs_dir_path, subdir), exist_ok=True)
    for rel_path, content in files.items():
        full_path = os.path.join(fs_dir_path, rel_path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, 'w', newline='') as f:
            f.write(content)


def read_file(full_path: str) -> str:
    with open(full_path, 'r', newline='') as f:
        return f.read()


def regular_files_in(fs_dir_path: str) -> set[str]:
    return {name for name in os.listdir(fs_dir_path)
            if os.path.isfile(os.path.join(fs_dir_path, name)) and not os.path.islink(os.path.join(fs_dir_path, name))}
