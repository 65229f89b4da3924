from typing import Union


class DirectoryMapError(Exception):
    """ Base class of everything raised by this package """
    path: Union[str,None]

    def __init__(self, message: str, path: Union[str,None] = None):
        super().__init__(message)
        self.path = path


class InvalidArgumentError(DirectoryMapError, ValueError):
    """ Bad construction arguments (unknown mode, extra arguments) or use of a closed map """
    pass


class AccessDeniedError(DirectoryMapError):
    """
        The access mode of the map forbids the requested mutation.
        Not an OSError on purpose so callers can tell a policy rejection from a failing filesystem.
    """
    mode: str

    def __init__(self, message: str, path: Union[str,None] = None, mode: str = ''):
        super().__init__(message, path)
        self.mode = mode


class FilesystemError(DirectoryMapError):
    """ An underlying filesystem call failed.  The OSError is chained as __cause__ """
    errno: Union[int,None]

    def __init__(self, message: str, path: Union[str,None] = None, errno: Union[int,None] = None):
        super().__init__(message, path)
        self.errno = errno

    @classmethod
    def wrap(cls, message: str, path: str, os_error: OSError) -> 'FilesystemError':
        return cls(f'{message}: {os_error.strerror or os_error}', path=path, errno=os_error.errno)
