from .local_fs import LocalFilesystem
from .mime import ExtensionMimeResolver

__all__ = ["ExtensionMimeResolver", "LocalFilesystem"]
