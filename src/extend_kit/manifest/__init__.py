from extend_kit.manifest.abc import ManifestStore
from extend_kit.manifest.real import JsonManifestStore

__all__ = [
    "JsonManifestStore",
    "ManifestStore",
]
