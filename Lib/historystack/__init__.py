"""# historystack

Two small wrappers that make any value reversible, without needing to know
anything about how the value changes.

A SaveStack keeps a current value plus a stack of saved values. push() saves
a copy, pushValue() saves the current value and replaces it, pop() restores
the last saved value:

    >>> s = SaveStack(0)
    >>> s.pushValue(5)
    >>> s == 5
    True
    >>> s.pop()
    5
    >>> s == 0
    True

A TimelineStack keeps a linear undo/redo history. save() commits a copy of
the current value and hands out a handle to modify it; undo() and redo() move
back and forth; saving after an undo discards what could have been redone:

    >>> t = TimelineStack(0)
    >>> t.save().value += 1
    >>> t == 1
    True
    >>> bool(t.undo()), t.get()
    (True, 0)
    >>> bool(t.redo()), t.get()
    (True, 1)
    >>> _ = t.undo()
    >>> t.save().value += 2
    >>> t == 2
    True
    >>> bool(t.redo())
    False

Both wrappers compare, order, hash and print like their current value, so
they can be used in place of it:

    >>> {0: "zero"}[SaveStack(0)]
    'zero'

Attribute access falls through to the current value as well, which makes
wrapping mutable objects convenient:

    >>> t = TimelineStack(["a"])
    >>> t.save().append("b")
    >>> t.get()
    ['a', 'b']
    >>> t.undo().value
    ['a']
"""

from .saveStack import SaveStack
from .timelineStack import EntryRef, Moved, StepResult, TimelineStack, Unchanged
from .valueWrapper import HistoryStackError, StaleEntryError, ValueWrapper

__all__ = [
    "EntryRef",
    "HistoryStackError",
    "Moved",
    "SaveStack",
    "StaleEntryError",
    "StepResult",
    "TimelineStack",
    "Unchanged",
    "ValueWrapper",
]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "<unknown>"
