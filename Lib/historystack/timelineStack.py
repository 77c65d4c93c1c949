from dataclasses import dataclass
import logging
from .valueWrapper import HistoryStackError, StaleEntryError, ValueWrapper, defaultCloner


logger = logging.getLogger(__name__)


class TimelineStack(ValueWrapper):

    """A TimelineStack keeps a linear undo/redo history of values, with a
    cursor pointing at the current one.

        >>> t = TimelineStack(0)

    save() commits a copy of the current value as a new history entry, and
    returns a handle to it. Modify the handle to produce the new state:

        >>> t.save().value += 1
        >>> t.get()
        1

    undo() and redo() move the cursor without discarding anything:

        >>> t.undo()
        Moved(entry=EntryRef(0, index=0))
        >>> t.redo()
        Moved(entry=EntryRef(1, index=1))

    Saving after an undo discards the abandoned future, so there is nothing
    left to redo:

        >>> _ = t.undo()
        >>> t.save().value += 2
        >>> t.get()
        2
        >>> t.redo()
        Unchanged(entry=EntryRef(2, index=1))

    An Unchanged result is false, but still carries a usable handle to the
    current entry:

        >>> result = t.redo()
        >>> bool(result), result.value
        (False, 2)

    Handles stay valid until the next save(), push(), undo() or redo() call
    on the same TimelineStack. After that, using them raises StaleEntryError.

    Copies are made with copy.deepcopy() by default. A different copy
    function can be passed as `cloner`. The optional `changeMonitor` is
    called with the TimelineStack after every save(), push() and every
    undo() or redo() that moved the cursor.
    """

    def __init__(self, start, cloner=None, changeMonitor=None):
        self._history = [start]
        self._cursor = 0
        self._generation = 0
        self._cloner = cloner if cloner is not None else defaultCloner
        self._changeMonitor = changeMonitor

    @property
    def cursor(self):
        return self._cursor

    def get(self):
        return self._entryAt(self._cursor)

    def set(self, value):
        self._entryAt(self._cursor)
        self._history[self._cursor] = value

    def entry(self):
        """Return a handle to the current entry."""
        return EntryRef(self, self._cursor)

    def save(self):
        """Append a copy of the current value as the new current entry, and
        return a handle to it. Any redo history is discarded first.
        """
        self._checkInvariants()
        snapshot = self._cloner(self._entryAt(self._cursor))
        return self._append(snapshot)

    def push(self, value):
        """Append `value` as the new current entry, and return a handle to
        it. Any redo history is discarded first. No copy is made.
        """
        return self._append(value)

    def undo(self):
        """Move the cursor one entry back. Return Moved with a handle to the
        new current entry, or Unchanged with a handle to the first entry if
        there is no earlier one.
        """
        self._checkInvariants()
        self._generation += 1
        if self._cursor == 0:
            logger.debug("undo at the start of the timeline")
            return Unchanged(EntryRef(self, 0))
        self._cursor -= 1
        self._notify()
        return Moved(EntryRef(self, self._cursor))

    def redo(self):
        """Move the cursor one entry forward. Return Moved with a handle to
        the new current entry, or Unchanged with a handle to the current
        entry if there is no later one.
        """
        self._checkInvariants()
        self._generation += 1
        if self._cursor + 1 >= len(self._history):
            logger.debug("redo at the end of the timeline")
            return Unchanged(EntryRef(self, self._cursor))
        self._cursor += 1
        self._notify()
        return Moved(EntryRef(self, self._cursor))

    def canUndo(self):
        return self._cursor > 0

    def canRedo(self):
        return self._cursor + 1 < len(self._history)

    def undoCount(self):
        """Return the number of entries before the current one."""
        return self._cursor

    def redoCount(self):
        """Return the number of entries after the current one."""
        return len(self._history) - self._cursor - 1

    def history(self):
        """Return all entries as a tuple, including redo entries."""
        return tuple(self._history)

    def copy(self):
        """Return a new TimelineStack with copies of all entries and the same
        cursor position, sharing this one's configuration.
        """
        history = [self._cloner(item) for item in self._history]
        clone = self.__class__(
            history[0], cloner=self._cloner, changeMonitor=self._changeMonitor)
        clone._history = history
        clone._cursor = self._cursor
        return clone

    def _append(self, value):
        self._checkInvariants()
        # Fails for a bad cursor even when asserts are disabled.
        self._entryAt(self._cursor)
        numDiscarded = len(self._history) - self._cursor - 1
        if numDiscarded:
            logger.debug("discarding %d redo entries", numDiscarded)
            del self._history[self._cursor + 1:]
        self._history.append(value)
        self._cursor += 1
        self._generation += 1
        self._notify()
        return EntryRef(self, self._cursor)

    def _entryAt(self, index):
        # Negative indices would silently wrap around.
        if index < 0:
            raise IndexError(f"history index out of range: {index}")
        return self._history[index]

    def _checkInvariants(self):
        assert self._history, "empty history"
        assert 0 <= self._cursor < len(self._history), \
            f"cursor {self._cursor} out of range for {len(self._history)} entries"

    def _notify(self):
        if self._changeMonitor is not None:
            self._changeMonitor(self)

    def __repr__(self):
        return (f"{self.__class__.__name__}({self._history!r}, "
                f"cursor={self._cursor})")


class EntryRef(ValueWrapper):

    """A handle to one entry of a TimelineStack. Reading or assigning
    `entryRef.value` (or calling get() and set()) reads or replaces the entry
    in place. A handle goes stale as soon as the TimelineStack it came from
    moves its cursor or gains an entry.
    """

    def __init__(self, timeline, index):
        self._timeline = timeline
        self._index = index
        self._generation = timeline._generation

    @property
    def index(self):
        return self._index

    def isValid(self):
        return self._generation == self._timeline._generation

    def _ensureValid(self):
        if not self.isValid():
            raise StaleEntryError(
                f"entry handle for index {self._index} used after the timeline changed")

    def get(self):
        self._ensureValid()
        return self._timeline._entryAt(self._index)

    def set(self, value):
        self._ensureValid()
        self._timeline._entryAt(self._index)
        self._timeline._history[self._index] = value

    def __repr__(self):
        if not self.isValid():
            return f"{self.__class__.__name__}(<stale>, index={self._index})"
        return f"{self.__class__.__name__}({self.get()!r}, index={self._index})"


@dataclass(eq=False)
class StepResult(ValueWrapper):

    """The outcome of TimelineStack.undo() or redo(). Either way, `entry` is
    a handle to the current entry afterwards, and the result itself reads
    and writes that entry like the handle does:

        >>> t = TimelineStack(0)
        >>> t.undo().value += 5
        >>> t.get()
        5

    Unlike other wrappers, bool() of a result tells whether the cursor moved,
    not the truthiness of the value.
    """

    entry: EntryRef
    moved = False

    def get(self):
        return self.entry.get()

    def set(self, value):
        self.entry.set(value)

    def __bool__(self):
        return self.moved

    def unwrap(self):
        """Return the current value if the cursor moved, else raise
        HistoryStackError.
        """
        if not self.moved:
            raise HistoryStackError("no earlier/later state in the timeline")
        return self.entry.get()


@dataclass(eq=False)
class Moved(StepResult):

    moved = True


@dataclass(eq=False)
class Unchanged(StepResult):

    moved = False
