import operator

class EnumItem(int):
    '''
    simple enumeration item.

    associates an int value with a name for printing.
    behaves as the plain int everywhere else (comparison, hashing, bit tests)
    '''
    def __new__(cls, value, name):
        if not isinstance(name, str):
            raise TypeError(f'enum item name must be str, not {type(name).__name__}')
        self = super().__new__(cls, operator.index(value))
        self.__dict__['name'] = name
        return self

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} is read-only')

    def __delattr__(self, key):
        raise AttributeError(f'{type(self).__name__} is read-only')

    def __getnewargs__(self):
        return (int(self), self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'{type(self).__name__}({int(self)}, {self.name!r})'


class Enum:
    '''
    enumeration container for EnumItems.

    exposes items as read-only attributes, indexed both by name and by value.
    populated once with add() and only queried afterwards.
    '''
    # width of the native unsigned int masks decoded by set_from_mask
    MASK_BITS = 32

    def __init__(self, name = None, items = ()):
        """
        Args:
            name (str, optional): name used when printing the container
            items (iterable, optional): (value, name) pairs added in order
        """
        self.__dict__['_name'] = name
        self.__dict__['_byname'] = {}
        self.__dict__['_byvalue'] = {}
        for value, item_name in items:
            self.add(value, item_name)

    def add(self, value, name):
        """create an EnumItem and register it under both its name and its value

        Raises:
            TypeError: value is not an integer or name is not a string
            ValueError: name is reserved, or name/value already registered

        Returns:
            EnumItem: the new item
        """
        item = EnumItem(value, name)
        if not name or name.startswith('_') or hasattr(type(self), name):
            raise ValueError(f'invalid enum item name {name!r}')
        if name in self._byname:
            raise ValueError(f'duplicate enum item name {name!r}')
        if item in self._byvalue:
            raise ValueError(f'duplicate enum item value {int(item)} ({name!r}, already {str(self._byvalue[item])!r})')
        self._byname[name] = item
        self._byvalue[int(item)] = item
        return item

    def get(self, name):
        """the item registered under name

        Raises:
            AttributeError: no such item
        """
        try:
            return self._byname[name]
        except KeyError:
            raise AttributeError(f'{type(self).__name__} has no item {name!r}') from None

    def __getattr__(self, name):
        # only reached when regular attribute lookup fails
        if name.startswith('_'):
            raise AttributeError(name)
        return self.get(name)

    def lookup_value(self, value):
        """the item whose value equals value; unknown values are returned unchanged"""
        return self._byvalue.get(value, value)

    def set_from_mask(self, mask):
        """decode a bit mask into the set of items whose value bit is set

        values outside [0, MASK_BITS) can never be represented and are skipped
        """
        mask = operator.index(mask) & ((1 << self.MASK_BITS) - 1)
        return {item for value, item in self._byvalue.items()
                if 0 <= value < self.MASK_BITS and (mask >> value) & 1}

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} attributes are read-only')

    def __delattr__(self, key):
        raise AttributeError(f'{type(self).__name__} attributes are read-only')

    def __iter__(self):
        return iter([self._byvalue[value] for value in sorted(self._byvalue)])

    def __len__(self):
        return len(self._byvalue)

    def __contains__(self, key):
        if isinstance(key, str):
            return key in self._byname
        try:
            return key in self._byvalue
        except TypeError:
            return False

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._byname))

    def __repr__(self):
        items = ', '.join(f'{item.name}={int(item)}' for item in self)
        if self._name is None:
            return f'<Enum: {items}>'
        return f'<Enum {self._name}: {items}>'
