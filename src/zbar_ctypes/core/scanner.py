'''
ImageScanner wraps a native zbar_image_scanner. It scans 8-bit grayscale (Y800) buffers and returns Symbols. Symbols are plain python objects: everything is copied out of the native symbol set before the native image is destroyed, so they stay valid for as long as the user keeps them.

The scanner owns its native handle. free() releases it early; otherwise it is released when the scanner is garbage collected.
'''
from ctypes import *
import logging

from . import zbar
from .zbar import ZBarError, check
from .symbol import SymbolType, Config, Modifier, Orientation, resolve

log = logging.getLogger(__name__)

FOURCC = lambda a, b, c, d: ord(a) | (ord(b) << 8) | (ord(c) << 16) | (ord(d) << 24)
Y800 = FOURCC('Y', '8', '0', '0')

class Symbol:
    '''
    A decoded bar code
    '''
    def __init__(self, type, data, quality = 1, count = 0, location = (), orientation = Orientation.UNKNOWN, configs = frozenset(), modifiers = frozenset()):
        self.type = type
        self.data = data
        self.quality = quality
        self.count = count
        self.location = list(location)
        self.orientation = orientation
        self.configs = configs
        self.modifiers = modifiers

    @classmethod
    def from_native(cls, lib, sym):
        """
        DO NOT call this by yourself; use ImageScanner.scan() instead
        """
        length = lib.zbar_symbol_get_data_length(sym)
        data = string_at(lib.zbar_symbol_get_data(sym), length) if length else b''
        location = [(lib.zbar_symbol_get_loc_x(sym, i), lib.zbar_symbol_get_loc_y(sym, i))
                    for i in range(lib.zbar_symbol_get_loc_size(sym))]
        return cls(
            type = SymbolType.lookup_value(lib.zbar_symbol_get_type(sym)),
            data = data,
            quality = lib.zbar_symbol_get_quality(sym),
            count = lib.zbar_symbol_get_count(sym),
            location = location,
            orientation = Orientation.lookup_value(lib.zbar_symbol_get_orientation(sym)),
            configs = Config.set_from_mask(lib.zbar_symbol_get_configs(sym)),
            modifiers = Modifier.set_from_mask(lib.zbar_symbol_get_modifiers(sym)),
        )

    def __str__(self):
        return self.data.decode('utf-8', errors='replace')

    def __repr__(self):
        return f'<Symbol {self.type} {self.data!r} quality={self.quality}>'


class ImageScanner:
    def __init__(self):
        self.lib = zbar.load()
        self.scanner = self.lib.zbar_image_scanner_create()
        if not self.scanner:
            raise MemoryError('zbar_image_scanner_create failed')
        log.debug(f'created image scanner {self.scanner:#x}')

    @property
    def handle(self):
        """the native scanner

        Raises:
            ValueError: the scanner was freed
        """
        if not self.scanner:
            raise ValueError('scanner already freed')
        return self.scanner

    def set_config(self, symbology, config, value = 1):
        """set one config of one symbology

        Args:
            symbology (SymbolType or str): the symbology; SymbolType.NONE applies to all of them
            config (Config or str): the setting
            value (int, optional): the new value. Defaults to 1.

        Raises:
            ValueError: the scanner was freed
            ZBarError: the native scanner rejected the setting
        """
        handle = self.handle
        symbology = resolve(SymbolType, symbology)
        config = resolve(Config, config)
        result = self.lib.zbar_image_scanner_set_config(handle, int(symbology), int(config), int(value))
        if result:
            raise ZBarError(result, f'cannot set {config}={value} for {symbology}')

    def parse_config(self, cfgstr : str):
        """parse a zbar config string such as 'qrcode.enable=1' and apply it

        Raises:
            ValueError: the scanner was freed
            ZBarError: invalid config string, or the setting was rejected

        Returns:
            tuple: the (symbology, config, value) that was applied
        """
        if not self.scanner:
            raise ValueError('scanner already freed')
        sym, cfg, val = c_int(), c_int(), c_int()
        result = self.lib.zbar_parse_config(cfgstr.encode('utf-8'), byref(sym), byref(cfg), byref(val))
        if result:
            raise ZBarError(result, f'invalid config {cfgstr!r}')
        symbology = SymbolType.lookup_value(sym.value)
        config = Config.lookup_value(cfg.value)
        self.set_config(symbology, config, val.value)
        return (symbology, config, val.value)

    def enable_cache(self, enable = True):
        handle = self.handle
        self.lib.zbar_image_scanner_enable_cache(handle, int(bool(enable)))

    def scan(self, data, width, height):
        """scan a grayscale buffer

        Args:
            data (bytes): width * height bytes of 8-bit luma, row major
            width (int): width in pixels
            height (int): height in pixels

        Raises:
            ValueError: the buffer is too small, or the scanner was freed
            ZBarError: the native scan failed

        Returns:
            list: the Symbols found, possibly empty
        """
        handle = self.handle
        if len(data) < width * height:
            raise ValueError(f'buffer of {len(data)} bytes too small for {width}x{height} image')

        buf = (c_ubyte * len(data)).from_buffer_copy(data)
        image = self.lib.zbar_image_create()
        if not image:
            raise MemoryError('zbar_image_create failed')
        try:
            self.lib.zbar_image_set_format(image, Y800)
            self.lib.zbar_image_set_size(image, width, height)
            self.lib.zbar_image_set_data(image, addressof(buf), len(data), None)
            n = check(self.lib.zbar_scan_image(handle, image), 'zbar_scan_image failed')

            symbols = []
            sym = self.lib.zbar_image_first_symbol(image)
            while sym:
                symbols.append(Symbol.from_native(self.lib, sym))
                sym = self.lib.zbar_symbol_next(sym)
        finally:
            self.lib.zbar_image_destroy(image)

        log.debug(f'{n} symbols in {width}x{height} image')
        return symbols

    def free(self):
        """destroy the native scanner. Safe to call more than once

        free() is called automatically when the scanner is garbage collected
        """
        if getattr(self, 'scanner', None):
            self.lib.zbar_image_scanner_destroy(self.scanner)
            log.debug(f'destroyed image scanner {self.scanner:#x}')
        self.scanner = None

    def __del__(self):
        self.free()
