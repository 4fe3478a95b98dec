from zbar_ctypes.reader import Reader
from zbar_ctypes.core import zbar

from PIL import Image
from tqdm import tqdm

import logging
import sys

log = logging.getLogger(__name__)

logging.basicConfig(level=logging.WARNING)

def scan(paths, symbols = None):
    '''
    decode every image in paths and print what was found
    '''
    log.info(f'libzbar {".".join(map(str, zbar.version()))}')
    with Reader(symbols=symbols) as reader:
        bar = tqdm(paths)
        for path in bar:
            bar.set_description(path)
            for symbol in reader.decode(Image.open(path)):
                tqdm.write(f'{path}: {symbol.type} {symbol}')

USAGE = 'usage: scan.py [-s QRCODE,EAN13] image...'

def parse_args(args):
    '''
    split the command line into image paths and the optional symbology list
    '''
    symbols = None
    if args[:1] == ['-s']:
        if len(args) < 2:
            sys.exit(USAGE)
        symbols = args[1].split(',')
        args = args[2:]
    if not args:
        sys.exit(USAGE)
    return args, symbols

if __name__ == '__main__':
    paths, symbols = parse_args(sys.argv[1:])
    scan(paths, symbols)
