import copy


class HistoryStackError(Exception):
    pass


class StaleEntryError(HistoryStackError):
    pass


defaultCloner = copy.deepcopy


def unwrapValue(obj):
    """Return the current value of `obj` if it is a ValueWrapper, else `obj`
    itself.
    """
    if isinstance(obj, ValueWrapper):
        return obj.get()
    return obj


class ValueWrapper:

    """Base class for objects that stand in for a single "current" value.

    Subclasses implement get() and set(). Everything else is derived from
    those two: comparison, ordering and hashing use the current value only,
    so a wrapper and a bare value with the same content are interchangeable
    as dict keys and in comparisons:

        >>> from historystack import SaveStack
        >>> s = SaveStack(3)
        >>> s == 3, 3 == s, s < 4, hash(s) == hash(3)
        (True, True, True, True)
        >>> str(s)
        '3'

    Attribute lookups that the wrapper itself can't satisfy are forwarded
    to the current value, as is the container protocol:

        >>> s = SaveStack([1, 2])
        >>> s.append(3)
        >>> len(s), s[-1], 2 in s
        (3, 3, True)
    """

    def get(self):
        raise NotImplementedError

    def set(self, value):
        raise NotImplementedError

    @property
    def value(self):
        return self.get()

    @value.setter
    def value(self, value):
        self.set(value)

    # Transparency

    def __eq__(self, other):
        return self.get() == unwrapValue(other)

    def __ne__(self, other):
        return self.get() != unwrapValue(other)

    def __lt__(self, other):
        return self.get() < unwrapValue(other)

    def __le__(self, other):
        return self.get() <= unwrapValue(other)

    def __gt__(self, other):
        return self.get() > unwrapValue(other)

    def __ge__(self, other):
        return self.get() >= unwrapValue(other)

    def __hash__(self):
        return hash(self.get())

    def __bool__(self):
        return bool(self.get())

    def __str__(self):
        return str(self.get())

    def __format__(self, formatSpec):
        return format(self.get(), formatSpec)

    def __getattr__(self, attr):
        # Only called when normal lookup fails. Private names belong to the
        # wrapper (and may not exist yet during construction or copying).
        if attr.startswith("_"):
            raise AttributeError(attr)
        return getattr(self.get(), attr)

    # Container protocol

    def __len__(self):
        return len(self.get())

    def __iter__(self):
        return iter(self.get())

    def __contains__(self, item):
        return item in self.get()

    def __getitem__(self, key):
        return self.get()[key]

    def __setitem__(self, key, value):
        self.get()[key] = value

    def __delitem__(self, key):
        del self.get()[key]
