# this file is the python ctypes version of the parts of zbar.h we use

from ctypes import *
from ctypes.util import find_library
import os
import logging

from .. import LibraryNotFoundError

log = logging.getLogger(__name__)

zbar_image_scanner_p = c_void_p # opaque
zbar_image_p = c_void_p # opaque
zbar_symbol_p = c_void_p # opaque

_lib = None

class ZBarError(Exception):
    def __init__(self, result, message = None):
        self.result = result
        self.message = message

    def __str__(self):
        if self.message is None:
            return f'zbar error {self.result}'
        return f'{self.message} (zbar error {self.result})'

def check(result, message = None):
    if result < 0:
        raise ZBarError(result, message)
    return result

def _declare(lib):
    lib.zbar_version.argtypes = [POINTER(c_uint), POINTER(c_uint), POINTER(c_uint)]
    lib.zbar_version.restype = c_int
    lib.zbar_set_verbosity.argtypes = [c_int]
    lib.zbar_set_verbosity.restype = None
    lib.zbar_increase_verbosity.argtypes = []
    lib.zbar_increase_verbosity.restype = None
    lib.zbar_parse_config.argtypes = [c_char_p, POINTER(c_int), POINTER(c_int), POINTER(c_int)]
    lib.zbar_parse_config.restype = c_int

    lib.zbar_image_scanner_create.argtypes = []
    lib.zbar_image_scanner_create.restype = zbar_image_scanner_p
    lib.zbar_image_scanner_destroy.argtypes = [zbar_image_scanner_p]
    lib.zbar_image_scanner_destroy.restype = None
    lib.zbar_image_scanner_set_config.argtypes = [zbar_image_scanner_p, c_int, c_int, c_int]
    lib.zbar_image_scanner_set_config.restype = c_int
    lib.zbar_image_scanner_enable_cache.argtypes = [zbar_image_scanner_p, c_int]
    lib.zbar_image_scanner_enable_cache.restype = None
    lib.zbar_scan_image.argtypes = [zbar_image_scanner_p, zbar_image_p]
    lib.zbar_scan_image.restype = c_int

    lib.zbar_image_create.argtypes = []
    lib.zbar_image_create.restype = zbar_image_p
    lib.zbar_image_destroy.argtypes = [zbar_image_p]
    lib.zbar_image_destroy.restype = None
    lib.zbar_image_set_format.argtypes = [zbar_image_p, c_ulong]
    lib.zbar_image_set_format.restype = None
    lib.zbar_image_set_size.argtypes = [zbar_image_p, c_uint, c_uint]
    lib.zbar_image_set_size.restype = None
    # last argument is the cleanup handler, always NULL here
    lib.zbar_image_set_data.argtypes = [zbar_image_p, c_void_p, c_ulong, c_void_p]
    lib.zbar_image_set_data.restype = None
    lib.zbar_image_first_symbol.argtypes = [zbar_image_p]
    lib.zbar_image_first_symbol.restype = zbar_symbol_p

    lib.zbar_symbol_next.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_next.restype = zbar_symbol_p
    lib.zbar_symbol_get_type.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_type.restype = c_int
    lib.zbar_symbol_get_data.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_data.restype = c_void_p
    lib.zbar_symbol_get_data_length.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_data_length.restype = c_uint
    lib.zbar_symbol_get_quality.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_quality.restype = c_int
    lib.zbar_symbol_get_count.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_count.restype = c_int
    lib.zbar_symbol_get_loc_size.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_loc_size.restype = c_uint
    lib.zbar_symbol_get_loc_x.argtypes = [zbar_symbol_p, c_uint]
    lib.zbar_symbol_get_loc_x.restype = c_int
    lib.zbar_symbol_get_loc_y.argtypes = [zbar_symbol_p, c_uint]
    lib.zbar_symbol_get_loc_y.restype = c_int
    lib.zbar_symbol_get_orientation.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_orientation.restype = c_int
    lib.zbar_symbol_get_configs.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_configs.restype = c_uint
    lib.zbar_symbol_get_modifiers.argtypes = [zbar_symbol_p]
    lib.zbar_symbol_get_modifiers.restype = c_uint

def load():
    '''
    load libzbar on first use; ZBAR_LIBRARY overrides the ctypes lookup
    '''
    global _lib
    if _lib is not None:
        return _lib

    path = os.environ.get('ZBAR_LIBRARY') or find_library('zbar')
    if not path:
        raise LibraryNotFoundError('libzbar not found, install zbar or set ZBAR_LIBRARY')
    try:
        lib = cdll.LoadLibrary(path)
        _declare(lib)
    except (OSError, AttributeError) as e:
        raise LibraryNotFoundError(f'cannot load {path}: {e}') from e

    log.debug(f'loaded {path}')
    _lib = lib
    return _lib

def version():
    """
    Returns:
        tuple: (major, minor, patch) of the loaded libzbar
    """
    lib = load()
    major, minor, patch = c_uint(), c_uint(), c_uint()
    check(lib.zbar_version(byref(major), byref(minor), byref(patch)), 'zbar_version failed')
    return (major.value, minor.value, patch.value)

def set_verbosity(level : int):
    load().zbar_set_verbosity(level)

def increase_verbosity():
    load().zbar_increase_verbosity()
