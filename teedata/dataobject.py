"""
dataobject
Key/value containers with magic accessors
"""

from collections.abc import Mapping
from functools import partial
from sortedcontainers import SortedDict
import threading as threading
from .util import underscore as _underscore, fmt_list
from .logger import Logger
_log = Logger(__file__)

class InvalidMethod(AttributeError):
    """
    Raised when a dynamic accessor does not start with one of 'get', 'set', 'uns' or 'has'.
    Derives from AttributeError, hence hasattr() returns False for such names.
    """

    def __init__(self, class_name : str, method : str):
        AttributeError.__init__(self, "Invalid method %s.%s" % (class_name, method))
        self.class_name = class_name
        self.method     = method

_PREFIXES   = ("get", "set", "uns", "has")
_MULTI_KEYS = (list, tuple, set, frozenset)

class DataObject(object):
    """
    Data object: a key/value store with explicit, item and magic accessors.
    Intended as base class for loosely typed model objects.

        class User( DataObject ):
            pass

        user = User( first_name="Ann" )
        user.setUserId( 12 )                   # same as user.setData('user_id', 12)
        user.getFirstName()         --> 'Ann'
        user['user_id']             --> 12
        user.hasEmail()             --> False
        user.getEmail('-')          --> '-'
        user.unsUserId()                       # same as user.unsetData('user_id')
        user.getData()              --> {'first_name': 'Ann'}

    Magic accessors
        The first three letters of a method name select the operation, the remainder is converted
        into the key with underscore(), e.g. 'getHTMLParser' reads 'h_t_m_l_parser'.

            getXyz( default=None )     getData( 'xyz', default )
            setXyz( value=None )       setData( 'xyz', value ), returns self
            unsXyz()                   unsetData( 'xyz' ), returns self
            hasXyz()                   hasData( 'xyz' )

        Surplus positional arguments are ignored.
        Any other name raises InvalidMethod. Names starting with '__' are handled as standard attributes.

    Item access
        obj[key] returns None for missing keys, and 'del obj[key]' ignores missing keys.

    Switches (class attributes, may be overwritten in derived classes)
        FORWARD_GET_DEFAULT : if False, getXyz(default) ignores 'default' and returns None for missing keys.
        ISSET_SEMANTICS     : if True, 'key in obj' is False for keys whose value is None.
    """

    FORWARD_GET_DEFAULT = True
    ISSET_SEMANTICS     = False

    _underscore_cache = {}
    _underscore_lock  = threading.Lock()
    _instance         = None
    _instance_lock    = threading.Lock()

    def __init__(self, data : Mapping = None, **kwargs):
        """
        Initialize with an optional mapping and/or keyword arguments.
        The input is copied.
        """
        _log.verify( data is None or isinstance(data, Mapping), "'data' must be a Mapping. Found type %s", type(data).__name__ )
        self._data = self._new_store( data if not data is None else {} )
        self._data.update(kwargs)

    @staticmethod
    def _new_store( data : Mapping ):
        """ Returns a new store initialized with a copy of 'data' """
        return dict(data)

    # explicit accessors
    # ------------------

    def hasData(self, key : str = "") -> bool:
        """
        If 'key' is not a non-empty string, returns whether the object has any data.
        Otherwise returns whether 'key' is present. A key set to None is present.
        """
        if not isinstance(key, str) or key == "":
            return len(self._data) > 0
        return key in self._data

    def setData(self, key, value = None):
        """
        If 'key' is a Mapping, replaces all data with a copy of 'key'.
        Otherwise sets 'key' to 'value'.
        Returns self.
        """
        if isinstance(key, Mapping):
            self._data = self._new_store(key)
        else:
            self._data[key] = value
        return self

    def getData(self, key = "", default = None):
        """
        Returns a copy of all data if 'key' is empty, the value of 'key' if present, and 'default' otherwise.
        """
        if isinstance(key, str) and key == "":
            return self._new_store(self._data)
        return self._data.get(key, default)

    def unsetData(self, key = None):
        """
        Removes 'key' if present. 'key' may be a list, tuple or set of keys.
        If 'key' is None, removes all data.
        Returns self.
        """
        if key is None:
            return self.setData({})
        for k in (key if isinstance(key, _MULTI_KEYS) else (key,)):
            self._data.pop(k, None)
        return self

    def isEmpty(self) -> bool:
        """ Whether the object has no data """
        return len(self._data) == 0

    # magic accessors
    # ---------------

    @staticmethod
    def underscore( name : str ) -> str:
        """
        Converts an accessor suffix such as 'FooBar2' into its key 'foo_bar_2'.
        Results are cached for all DataObject classes for the lifetime of the process.
        """
        try:
            return DataObject._underscore_cache[name]
        except KeyError:
            pass
        key = _underscore(name)
        with DataObject._underscore_lock:
            return DataObject._underscore_cache.setdefault(name, key)

    def _resolve(self, method : str):
        """ Returns (prefix, key) for 'method' or raises InvalidMethod """
        prefix = method[:3]
        if not prefix in _PREFIXES:
            _log.debug( "%s.%s is not an accessor: names must start with %s", type(self).__name__, method, fmt_list(_PREFIXES, link="or") )
            raise InvalidMethod(type(self).__name__, method)
        return prefix, self.underscore(method[3:])

    def invoke(self, method : str, *args):
        """
        Executes the magic accessor 'method' with positional arguments 'args'.
        obj.invoke('setUserId', 12) is equivalent to obj.setUserId(12).
        """
        prefix, key = self._resolve(method)
        if prefix == "get":
            default = args[0] if len(args) > 0 and self.FORWARD_GET_DEFAULT else None
            return self.getData(key, default)
        if prefix == "set":
            return self.setData(key, args[0] if len(args) > 0 else None)
        return self.unsetData(key) if prefix == "uns" else self.hasData(key)

    def __getattr__(self, method : str):
        """ Returns the magic accessor 'method' """
        if method[:2] == "__": raise AttributeError(method) # private members are never accessors
        self._resolve(method)
        return partial(self.invoke, method)

    # singleton
    # ---------

    @classmethod
    def instance(cls, *args):
        """
        Returns the one shared data object of the process, creating it on the first call.
        The first caller's class is instantiated; later calls return that object from any class.
        On creation, a single Mapping argument becomes the data; otherwise the arguments
        are stored under their positions 0, 1, ...
        Arguments of later calls are ignored.
        """
        obj = DataObject._instance
        if obj is None:
            with DataObject._instance_lock:
                obj = DataObject._instance
                if obj is None:
                    data = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else dict(enumerate(args))
                    obj  = cls(data)
                    DataObject._instance = obj
                    _log.debug( "Created shared %s with %ld entries", cls.__name__, len(obj) )
        return obj

    # item access
    # -----------

    def __contains__(self, key) -> bool:
        if self.ISSET_SEMANTICS:
            return self._data.get(key, None) is not None
        return key in self._data
    def __getitem__(self, key):
        return self._data.get(key, None)
    def __setitem__(self, key, value):
        self._data[key] = value
    def __delitem__(self, key):
        self._data.pop(key, None)
    def __len__(self) -> int:
        return len(self._data)
    def __iter__(self):
        return iter(self._data)

    def keys(self):
        return self._data.keys()
    def items(self):
        return self._data.items()
    def values(self):
        return self._data.values()

    def __eq__(self, other) -> bool:
        if isinstance(other, DataObject):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented
    __hash__ = None

    def __repr__(self) -> str:
        return "%s(%r)" % (type(self).__name__, dict(self._data))

Mapping.register(DataObject)

class SortedDataObject(DataObject):
    """
    DataObject which keeps its keys sorted, e.g.

        d = SortedDataObject( b=2, a=1 )
        list(d)      --> ['a', 'b']

    Keys must be comparable with each other.
    """

    @staticmethod
    def _new_store( data : Mapping ):
        return SortedDict(data)
