from .filesystem import FilesystemPort
from .mime import MimeResolverPort

__all__ = ["FilesystemPort", "MimeResolverPort"]
