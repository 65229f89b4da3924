from .access_mode import AccessMode
from .directory_map import DirectoryMap, default_logger
from .errors import DirectoryMapError, InvalidArgumentError, AccessDeniedError, FilesystemError
from .logging_setup import set_up_logging


# silence the PyRight unused symbol warnings
if AccessMode or DirectoryMap or default_logger or DirectoryMapError or InvalidArgumentError or AccessDeniedError or FilesystemError or set_up_logging:
    pass
