import numpy as np
import pytest

from zbar_ctypes import LibraryNotFoundError
from zbar_ctypes.common import Enum
from zbar_ctypes.core import zbar

EAN_L = ['0001101', '0011001', '0010011', '0111101', '0100011',
         '0110001', '0101111', '0111011', '0110111', '0001011']
EAN_R = [''.join('1' if b == '0' else '0' for b in code) for code in EAN_L]
EAN_G = [code[::-1] for code in EAN_R]
EAN_PARITY = ['LLLLLL', 'LLGLGG', 'LLGGLG', 'LLGGGL', 'LGLLGG',
              'LGGLLG', 'LGGGLL', 'LGLGLG', 'LGLGGL', 'LGGLGL']

def ean13_modules(digits):
    first, left, right = int(digits[0]), digits[1:7], digits[7:]
    bits = '101'
    for parity, d in zip(EAN_PARITY[first], left):
        bits += (EAN_L if parity == 'L' else EAN_G)[int(d)]
    bits += '01010'
    for d in right:
        bits += EAN_R[int(d)]
    return bits + '101'

@pytest.fixture
def flags():
    """Enum (1, A), (2, B), (4, C) used throughout the enum tests."""
    return Enum('Flags', [(1, 'A'), (2, 'B'), (4, 'C')])

@pytest.fixture
def ean13_image():
    """uint8 grayscale image of the EAN-13 bar code 5901234123457."""
    bits = ean13_modules('5901234123457')
    module, quiet, height = 3, 12, 80
    row = np.array([0 if b == '1' else 255 for b in '0' * quiet + bits + '0' * quiet], dtype=np.uint8)
    row = np.repeat(row, module)
    image = np.full((height + 20, row.shape[0]), 255, dtype=np.uint8)
    image[10:10 + height] = row
    return image

@pytest.fixture
def lib():
    """the loaded libzbar; skips the test when it is not installed."""
    try:
        return zbar.load()
    except LibraryNotFoundError as e:
        pytest.skip(str(e))
