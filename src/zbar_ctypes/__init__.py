"""ZBar bar code reading for Python.

This package provides ctypes bindings to the ZBar bar code reader library
(libzbar). Native integer constants (symbol types, config settings, modifiers,
orientations) are exposed as Enum containers of EnumItems: ints that print as
their names.

Quick Start:
    from zbar_ctypes.reader import Reader
    from PIL import Image

    with Reader(symbols=['QRCODE', 'EAN13']) as reader:
        for symbol in reader.decode(Image.open('/path/to/image.png')):
            print(symbol.type, symbol.data)

Requirements:
    - libzbar 0.23 or newer (symbol orientation, modifiers and the three
      part zbar_version are needed) discoverable by ctypes, or its path in the
      ZBAR_LIBRARY environment variable
    - numpy and Pillow for image input

Exceptions:
    LibraryNotFoundError: Raised when libzbar cannot be located or loaded.
"""

class LibraryNotFoundError(Exception):
    """Raised when the ZBar shared library cannot be found or loaded."""
    pass
