from .credential_provider import CredentialProvider
from .hoop_media_saver import HoopMediaSaver
from .hoop_notifier import HoopNotifier
from .hoop_reader import HoopReader
from .hoop_saver import HoopSaver

__all__ = [
    "CredentialProvider",
    "HoopMediaSaver",
    "HoopNotifier",
    "HoopReader",
    "HoopSaver",
]
