# native constants of zbar.h, exposed as Enum containers

from ..common import Enum

# zbar_symbol_type_t
SymbolType = Enum('SymbolType', [
    (0,   'NONE'),
    (1,   'PARTIAL'),
    (2,   'EAN2'),
    (5,   'EAN5'),
    (8,   'EAN8'),
    (9,   'UPCE'),
    (10,  'ISBN10'),
    (12,  'UPCA'),
    (13,  'EAN13'),
    (14,  'ISBN13'),
    (15,  'COMPOSITE'),
    (25,  'I25'),
    (34,  'DATABAR'),
    (35,  'DATABAR_EXP'),
    (38,  'CODABAR'),
    (39,  'CODE39'),
    (57,  'PDF417'),
    (64,  'QRCODE'),
    (80,  'SQCODE'),
    (93,  'CODE93'),
    (128, 'CODE128'),
])

# zbar_config_t
# MIN_LEN and above do not fit the 32 bit config mask of a symbol
Config = Enum('Config', [
    (0,     'ENABLE'),
    (1,     'ADD_CHECK'),
    (2,     'EMIT_CHECK'),
    (3,     'ASCII'),
    (4,     'BINARY'),
    (0x20,  'MIN_LEN'),
    (0x21,  'MAX_LEN'),
    (0x40,  'UNCERTAINTY'),
    (0x80,  'POSITION'),
    (0x81,  'TEST_INVERTED'),
    (0x100, 'X_DENSITY'),
    (0x101, 'Y_DENSITY'),
])

# zbar_modifier_t
Modifier = Enum('Modifier', [
    (0, 'GS1'),
    (1, 'AIM'),
])

# zbar_orientation_t
Orientation = Enum('Orientation', [
    (-1, 'UNKNOWN'),
    (0,  'UP'),
    (1,  'RIGHT'),
    (2,  'DOWN'),
    (3,  'LEFT'),
])

def resolve(enum, x):
    '''
    accept an item, a plain int or an item name (case-insensitive)
    '''
    if isinstance(x, str):
        return enum.get(x.upper())
    return enum.lookup_value(x)
