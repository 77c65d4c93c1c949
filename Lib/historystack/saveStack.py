import logging
from .valueWrapper import ValueWrapper, defaultCloner


logger = logging.getLogger(__name__)


class SaveStack(ValueWrapper):

    """A SaveStack wraps a current value and a LIFO stack of saved values.

        >>> s = SaveStack(0)

    pushValue() moves the current value onto the stack and makes its argument
    the new current value. pop() brings the most recently saved value back,
    and returns the value it replaced:

        >>> s.pushValue(5)
        >>> s.get()
        5
        >>> s.pop()
        5
        >>> s.get()
        0

    push() saves a copy of the current value, leaving the current value
    itself in place, so it can be modified and later restored:

        >>> s = SaveStack([1, 2])
        >>> s.push()
        >>> s.append(3)
        >>> s.get()
        [1, 2, 3]
        >>> s.pop()
        [1, 2, 3]
        >>> s.get()
        [1, 2]

    pop() returns None when there is nothing to restore, and leaves the
    current value alone:

        >>> s.pop() is None
        True

    Copies are made with copy.deepcopy() by default. A different copy
    function can be passed as `cloner`. The optional `changeMonitor` is
    called with the SaveStack after every change to it.
    """

    def __init__(self, value, cloner=None, changeMonitor=None):
        self._stack = []
        self._current = value
        self._cloner = cloner if cloner is not None else defaultCloner
        self._changeMonitor = changeMonitor

    def get(self):
        return self._current

    def set(self, value):
        self._current = value

    def push(self):
        """Save a copy of the current value. The current value is unchanged."""
        snapshot = self._cloner(self._current)
        self._stack.append(snapshot)
        self._notify()

    def pushValue(self, value):
        """Save the current value as-is and replace it by `value`. No copy
        is made.
        """
        self._stack.append(self._current)
        self._current = value
        self._notify()

    def pop(self):
        """Restore the most recently saved value, and return the value it
        replaced. Return None if no saved value is left.

        A popped None is indistinguishable from an empty stack by the
        return value alone; check canPop() first when None may be saved.
        """
        if not self._stack:
            logger.debug("pop on empty save stack")
            return None
        previous = self._current
        self._current = self._stack.pop()
        self._notify()
        return previous

    def canPop(self):
        return bool(self._stack)

    def depth(self):
        """Return the number of saved values."""
        return len(self._stack)

    def snapshots(self):
        """Return the saved values as a tuple, oldest first."""
        return tuple(self._stack)

    def copy(self):
        """Return a new SaveStack with copies of the current value and all
        saved values, sharing this one's configuration.
        """
        clone = self.__class__(
            self._cloner(self._current),
            cloner=self._cloner,
            changeMonitor=self._changeMonitor,
        )
        clone._stack = [self._cloner(item) for item in self._stack]
        return clone

    def _notify(self):
        if self._changeMonitor is not None:
            self._changeMonitor(self)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._current!r}, stack={self._stack!r})"
