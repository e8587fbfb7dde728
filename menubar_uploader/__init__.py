from .uploader import MenuBarUploader

__all__ = ["MenuBarUploader"]
