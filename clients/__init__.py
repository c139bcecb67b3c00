"""
Outbound HTTP clients for the Wordly widget
"""

from .base_client import BaseClient
from .dictionary_client import DictionaryClient
from .audio_client import AudioClient, AudioClip

__all__ = [
    "BaseClient",
    "DictionaryClient",
    "AudioClient",
    "AudioClip"
]
