# xlmatch/__init__.py

from .matcher   import MatcherFacade, MatchReport, compare
from .options   import CompareOptions
from .document  import TabularDocument
from .styles    import MatchMarker
from .messages  import MessageBox
from .bindings  import Bindings, default_bindings
from .errors    import MatchError

__all__ = [
    "MatcherFacade",
    "MatchReport",
    "compare",
    "CompareOptions",
    "TabularDocument",
    "MatchMarker",
    "MessageBox",
    "Bindings",
    "default_bindings",
    "MatchError",
]
