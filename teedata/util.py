"""
String helpers for teedata
"""

import re as re
import string as string

def _fmt( text : str, args = None, kwargs = None ) -> str:
    """ Applies %-formatting with either positional 'args' or named 'kwargs', if 'text' contains a '%' """
    if text.find('%') == -1:
        return text
    if not args is None and len(args) > 0:
        assert kwargs is None or len(kwargs) == 0, "Cannot specify both 'args' and 'kwargs'"
        return text % tuple(args)
    if not kwargs is None and len(kwargs) > 0:
        return text % kwargs
    return text

def fmt_list( lst, none : str = "-", link : str = "and" ) -> str:
    """
    Joins the elements of 'lst' with commas, using 'link' before the last one:
        fmt_list(['get','set','uns'], link="or") --> 'get, set or uns'
    Returns 'none' for an empty list.
    """
    lst = list(lst) if not lst is None else []
    if len(lst) == 0:
        return str(none)
    if len(lst) == 1:
        return str(lst[0])
    return ", ".join( str(k) for k in lst[:-1] ) + " " + link + " " + str(lst[-1])

# accessor names
# --------------

_boundary    = re.compile(r"([A-Z]|[0-9]+)")
_ascii_lower = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

def underscore( name : str ) -> str:
    """
    Converts the camel-case suffix of an accessor name into an underscored key.
    An underscore is placed in front of every upper case letter and every run of digits,
    the result is lower cased and leading or trailing underscores are removed.

        underscore("FooBar2Baz") --> 'foo_bar_2_baz'
        underscore("HTMLParser") --> 'h_t_m_l_parser'
        underscore("ID")         --> 'i_d'

    Only ASCII letters are boundaries and only ASCII letters are lower cased:
        underscore("NameÄb")     --> 'nameÄb'

    This function does not cache. Use DataObject.underscore() for the memoized version.
    """
    return _boundary.sub(r"_\1", name).strip('_').translate(_ascii_lower)
