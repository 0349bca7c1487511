from .Exceptions import *
from .Upath import UniversalPath
from .fs.common.FSOp import FSOp
from .fs.common.ProcessStates import CopyState
from .fs.fsop.file.Copy import FileCopy, DEFAULT_WAIT_TIMEOUT
from .vfs.VfsCallback import VfsCallback
from .vfs.VfsConnection import VfsConnection
from .vfs.VfsRequest import VfsRequest, ACTION_COPY
