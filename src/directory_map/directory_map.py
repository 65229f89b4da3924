import os
import stat
import logging
from typing import Iterator, Union
from .access_mode import AccessMode
from .errors import AccessDeniedError, FilesystemError, InvalidArgumentError

default_logger = logging.getLogger(__name__)

Contents = Union[str,bytes]


class DirectoryMap:
    """
    Treats the regular files of one directory as a key/value store of file contents.

    Keys are paths.  A relative key is taken relative to the bound directory, a key
    beginning with "/" is used as is.  Which mutations are allowed is decided by the
    AccessMode given at construction.

    usage:
        with DirectoryMap('create', '/tmp/td') as dm:
            dm.set('a.txt', 'hello')       # writes /tmp/td/a.txt
            dm.get('a.txt')                # 'hello'
            dm.get('missing')              # None, also for directories and symlinks
            dm.exists('subdir')            # True for any kind of entry
            list(dm.keys())                # ['a.txt', 'subdir/']

    Unless an absolute directory is given, a later os.chdir() changes which files the
    path based operations touch.  Symbolic links are never followed except where a key
    ends in "/" and names a link to a directory.
    """
    directory: str
    mode: AccessMode
    binary: bool
    logger: logging.Logger
    _dir_fd: Union[int,None]

    def __init__(self,
                 mode: Union[AccessMode,str,None] = None,
                 directory: Union[str,None] = None,
                 *extra,
                 binary: bool = False,
                 logger: logging.Logger = default_logger):
        self._dir_fd = None
        class_name = self.__class__.__name__
        if extra:
            raise InvalidArgumentError(f'{class_name}: Usage: "{class_name}(mode, directory)", got {len(extra)} extra argument(s)')
        self.mode = AccessMode.parse(mode)
        self.directory = directory or '.'
        self.binary = binary
        self.logger = logger
        self._dir_fd = self._open_directory(self.directory)
        self.logger.info(f'{class_name} bound to "{self.directory}" with mode "{self.mode}"')

    def _open_directory(self, directory: str) -> int:
        flags = os.O_RDONLY | getattr(os, 'O_DIRECTORY', 0)
        try:
            fd = os.open(directory, flags)
        except OSError as e:
            raise FilesystemError.wrap(f'{self.__class__.__name__}: opendir "{directory}"', directory, e) from e
        # without O_DIRECTORY a regular file opens just fine
        if not stat.S_ISDIR(os.fstat(fd).st_mode):
            os.close(fd)
            raise FilesystemError(f'{self.__class__.__name__}: opendir "{directory}": Not a directory', path=directory)
        return fd

    def _resolve(self, path: str) -> str:
        if path.startswith('/'):
            return path
        return os.path.join(self.directory, path)

    @staticmethod
    def _lstat(file_path: str) -> Union[os.stat_result,None]:
        try:
            return os.lstat(file_path)
        except OSError:
            return None

    def _read(self, file_path: str) -> Contents:
        try:
            with open(file_path, 'rb') as file:
                data = file.read()
        except OSError as e:
            raise FilesystemError.wrap(f'{self.__class__.__name__}: reading "{file_path}"', file_path, e) from e
        if self.binary:
            return data
        # undecodable bytes come back as lone surrogates and are written back unchanged
        return data.decode('utf-8', 'surrogateescape')

    def _encode(self, file_path: str, contents: Contents) -> bytes:
        if isinstance(contents, bytes):
            return contents
        try:
            return contents.encode('utf-8', 'surrogateescape')
        except UnicodeError as e:
            raise FilesystemError(f'{self.__class__.__name__}: writing "{file_path}": {e}', path=file_path) from e

    def _write(self, file_path: str, data: bytes) -> None:
        try:
            with open(file_path, 'wb') as file:
                file.write(data)
        except OSError as e:
            raise FilesystemError.wrap(f'{self.__class__.__name__}: writing "{file_path}"', file_path, e) from e

    def _deny(self, message: str, file_path: str) -> AccessDeniedError:
        self.logger.warning(message)
        return AccessDeniedError(message, path=file_path, mode=self.mode.value)

    def get(self, path: str) -> Union[Contents,None]:
        """ The contents of the regular file at path, or None if there is no regular file there """
        file_path = self._resolve(path)
        st = self._lstat(file_path)
        if st is None or not stat.S_ISREG(st.st_mode):
            self.logger.debug(f'get "{file_path}": no regular file')
            return None
        self.logger.debug(f'get "{file_path}"')
        return self._read(file_path)

    def set(self, path: str, contents: Union[Contents,None]) -> Union[Contents,None]:
        """
            Write contents to the file at path if the access mode allows it and return them.
            Storing None does nothing and returns None.
        """
        if contents is None:
            return None
        expected_type = bytes if self.binary else str
        if not isinstance(contents, expected_type):
            raise TypeError(f'{self.__class__.__name__} stores {expected_type.__name__} contents, not {type(contents).__name__}')

        class_name = self.__class__.__name__
        file_path = self._resolve(path)
        st = self._lstat(file_path)
        if st is not None:
            if not self.mode.may_overwrite:
                raise self._deny(f'{class_name}: won\'t overwrite "{file_path}", mode is "{self.mode}"', file_path)
            if not stat.S_ISREG(st.st_mode):
                raise self._deny(f'{class_name}: can\'t overwrite non-file "{file_path}"', file_path)
        elif not self.mode.may_create:
            raise self._deny(f'{class_name}: won\'t create "{file_path}", mode is "{self.mode}"', file_path)

        self.logger.debug(f'set "{file_path}" ({len(contents)} {"bytes" if self.binary else "characters"})')
        # encoded before the file is opened, so a failure leaves it untouched
        self._write(file_path, self._encode(file_path, contents))
        return contents

    def delete(self, path: str) -> Union[Contents,None]:
        """ Remove the regular file at path and return what it contained.  A missing path is a no-op returning None """
        class_name = self.__class__.__name__
        contents = self.get(path)
        file_path = self._resolve(path)
        st = self._lstat(file_path)
        if st is None:
            return None

        if not self.mode.may_delete:
            raise self._deny(f'{class_name}: won\'t delete "{file_path}", mode is "{self.mode}"', file_path)
        if not stat.S_ISREG(st.st_mode):
            raise self._deny(f'{class_name}: won\'t delete non-file "{file_path}"', file_path)

        self.logger.debug(f'delete "{file_path}"')
        try:
            os.unlink(file_path)
        except OSError as e:
            raise FilesystemError.wrap(f'{class_name}: deleting "{file_path}"', file_path, e) from e
        return contents

    def exists(self, path: str) -> bool:
        """ True if anything at all is at path, dangling symlinks included """
        return self._lstat(self._resolve(path)) is not None

    def keys(self) -> Iterator[str]:
        """
            Lazily list the bound directory in native order, without "." and "..".
            Directory names get a trailing "/", symlinks to directories do not.
            Every call starts a fresh scan.
        """
        if self._dir_fd is None:
            raise InvalidArgumentError(f'{self.__class__.__name__}: "{self.directory}" has been closed', path=self.directory)
        return self._scan(self._dir_fd)

    def _scan(self, dir_fd: int) -> Iterator[str]:
        # each pass gets its own descriptor, so nested passes keep separate positions
        try:
            pass_fd = os.open('.', os.O_RDONLY | getattr(os, 'O_DIRECTORY', 0), dir_fd=dir_fd)
        except OSError as e:
            raise FilesystemError.wrap(f'{self.__class__.__name__}: opendir "{self.directory}"', self.directory, e) from e
        try:
            with os.scandir(pass_fd) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        yield entry.name + '/'
                    else:
                        yield entry.name
        finally:
            os.close(pass_fd)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def items(self) -> Iterator[tuple[str,Union[Contents,None]]]:
        for name in self.keys():
            yield name, self.get(name)

    def values(self) -> Iterator[Union[Contents,None]]:
        for _, contents in self.items():
            yield contents

    def clear(self) -> None:
        """ Remove every regular file directly inside the bound directory.  Stops at the first failure """
        class_name = self.__class__.__name__
        if not self.mode.may_clear:
            raise self._deny(f'{class_name}: won\'t clear directory "{self.directory}", mode is "{self.mode}"', self.directory)

        try:
            with os.scandir(self.directory) as entries:
                file_paths = [os.path.join(self.directory, entry.name)
                              for entry in entries if entry.is_file(follow_symlinks=False)]
        except OSError as e:
            raise FilesystemError.wrap(f'{class_name}: opendir "{self.directory}"', self.directory, e) from e

        for file_path in file_paths:
            self.logger.debug(f'clear: deleting "{file_path}"')
            try:
                os.unlink(file_path)
            except OSError as e:
                raise FilesystemError.wrap(f'{class_name}: deleting "{file_path}"', file_path, e) from e
        self.logger.info(f'cleared {len(file_paths)} file(s) from "{self.directory}"')

    def close(self) -> None:
        if self._dir_fd is not None:
            fd = self._dir_fd
            self._dir_fd = None
            os.close(fd)
            self.logger.info(f'{self.__class__.__name__} released "{self.directory}"')

    @property
    def closed(self) -> bool:
        return self._dir_fd is None

    def __enter__(self) -> 'DirectoryMap':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __del__(self):
        # construction may have failed before the handle existed
        if getattr(self, '_dir_fd', None) is not None:
            os.close(self._dir_fd)
            self._dir_fd = None

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(mode={self.mode.value!r}, directory={self.directory!r})'
