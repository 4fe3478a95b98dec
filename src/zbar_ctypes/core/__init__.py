"""Low-level ZBar bindings.

Most users should use zbar_ctypes.reader instead.

Modules:
    zbar: library loading, ZBarError, version and verbosity controls
    symbol: SymbolType, Config, Modifier and Orientation enums
    scanner: ImageScanner and Symbol classes
"""
