"""
Utilities shared by tagcore and taggrep: reading text files, the
keyword-configured SimpleClass base and the GenericException root.
"""


def file_contents(fname):
    """Whole file as text.  A leading byte order mark, common in TEI
    exports, is dropped so that it doesn't end up in the first token."""
    with open(fname, "rb") as f:
        return f.read().decode('utf-8-sig')


class SimpleClass(object):
    """
    Base for components configured by keyword arguments.  Each keyword
    becomes an attribute; subclasses fill in the others with _default().
    A '_defaults' dict can also be passed in.
    """

    def __init__(self, **args):
        defaults = args.pop('_defaults', {})
        self.__dict__.update(args)
        for arg, val in defaults.items():
            self._default(arg, val)

    def _default(self, arg, val):
        if self.__dict__.get(arg) is None:
            self.__dict__[arg] = val

    def file_contents(self, fname):
        return file_contents(fname)


class GenericException(Exception):
    """Root of the exceptions raised by tagcore and taggrep."""

    def __init__(self, msg=None):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)
