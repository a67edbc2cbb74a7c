"""treeed: tree-shaped observable state for Python."""

from importlib.metadata import version as _version

__version__ = _version("treeed")

from treeed.notifier import Notifier, Disposer
from treeed.observable import Observable
from treeed.conditional import ConditionalObservable
from treeed.group import Group
# textual bridge NOT auto-imported — opt-in only

__all__ = [
    "Notifier",
    "Disposer",
    "Observable",
    "ConditionalObservable",
    "Group",
]
