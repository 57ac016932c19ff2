from .file import FileTransport

__all__ = ["FileTransport"]
