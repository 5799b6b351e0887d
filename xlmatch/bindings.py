# xlmatch/bindings.py
"""
Capability table: operation names the GUI shell may call, mapped to plain functions.
"""
import logging
from typing import Callable, Dict, List, Optional

from .matcher import compare
from .messages import MessageBox
from .options import CompareOptions
from .storage import list_drives, list_files, list_spreadsheets

logger = logging.getLogger(__name__)


class Bindings:
    def __init__(self):
        self._table: Dict[str, Callable] = {}

    def bind(self, name: str, fn: Callable) -> None:
        if name in self._table:
            raise ValueError(f"operation '{name}' is already bound")
        self._table[name] = fn

    def invoke(self, name: str, *args, **kwargs):
        """Call the operation bound to name; unknown names raise KeyError."""
        try:
            fn = self._table[name]
        except KeyError:
            raise KeyError(f"no operation bound to '{name}'") from None
        logger.debug("invoke %s%r", name, args)
        return fn(*args, **kwargs)

    def names(self) -> List[str]:
        return sorted(self._table)

    def __contains__(self, name: str) -> bool:
        return name in self._table


def default_bindings(message_box: Optional[MessageBox] = None) -> Bindings:
    """
    Build the table the GUI uses: start, list_drives, list_files,
    list_spreadsheets, compare and msg_text.

    compare writes its status into message_box so msg_text can read it back from
    another thread.
    """
    box = message_box if message_box is not None else MessageBox()
    bindings = Bindings()

    def start() -> None:
        logger.info("UI is ready")

    def compare_bound(
        path_a: str,
        path_b: str,
        col_a: int,
        col_b: int,
        options: Optional[CompareOptions] = None,
    ) -> str:
        return compare(path_a, path_b, col_a, col_b, options=options, message_box=box)

    bindings.bind("start", start)
    bindings.bind("list_drives", list_drives)
    bindings.bind("list_files", list_files)
    bindings.bind("list_spreadsheets", list_spreadsheets)
    bindings.bind("compare", compare_bound)
    bindings.bind("msg_text", box.get)
    return bindings
