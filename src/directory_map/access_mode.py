from enum import Enum
from typing import Union
from .errors import InvalidArgumentError


class AccessMode(Enum):
    """
    Access policy of a DirectoryMap, chosen once at construction.

      READONLY      Access is strictly read-only.
      CREATE        Files may be created but not overwritten or deleted.
      OVERWRITE     Regular files may be created, overwritten or deleted.
      CLEARDIR      Also allow all regular files to be cleared at once.
    """
    READONLY = 'readonly'
    CREATE = 'create'
    OVERWRITE = 'overwrite'
    CLEARDIR = 'cleardir'

    @classmethod
    def parse(cls, value: Union['AccessMode',str,None]) -> 'AccessMode':
        if isinstance(value, AccessMode):
            return value
        if value is None or value == '':
            return cls.CREATE
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f'Invalid access mode "{value}", expected one of {", ".join(m.value for m in cls)}')

    @property
    def may_create(self) -> bool:
        return self is not AccessMode.READONLY

    @property
    def may_overwrite(self) -> bool:
        return self in (AccessMode.OVERWRITE, AccessMode.CLEARDIR)

    @property
    def may_delete(self) -> bool:
        return self.may_overwrite

    @property
    def may_clear(self) -> bool:
        return self is AccessMode.CLEARDIR

    def __str__(self) -> str:
        return self.value
