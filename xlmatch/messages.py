# xlmatch/messages.py

import threading


class MessageBox:
    """
    Status text shared between the GUI and comparison worker threads.
    """

    def __init__(self, text: str = ""):
        self._lock = threading.Lock()
        self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text
