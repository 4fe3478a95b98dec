from .core.scanner import ImageScanner
from .core.symbol import SymbolType, Config
from .image import to_y800

import logging

log = logging.getLogger(__name__)

class Reader:
    def __init__(self, symbols = None, config = (), cache = False):
        """
        Args:
            symbols (iterable, optional): SymbolType items or names to look for. Defaults to None, zbar's default set.
            config (iterable, optional): zbar config strings, e.g. 'qrcode.binary=1', applied in order.
            cache (bool, optional): only report symbols seen in several consecutive images, for video. Defaults to False.
        """
        self.scanner = ImageScanner()
        if symbols is not None:
            symbols = list(symbols)
            self.scanner.set_config(SymbolType.NONE, Config.ENABLE, 0)
            for symbol in symbols:
                self.scanner.set_config(symbol, Config.ENABLE, 1)
            log.debug(f'enabled symbologies {symbols}')
        for cfgstr in config:
            self.scanner.parse_config(cfgstr)
        if cache:
            self.scanner.enable_cache()

    def decode(self, image):
        """
        Args:
            image : a PIL image or uint8 numpy array, see image.to_y800

        Returns:
            list: the Symbols found
        """
        data, width, height = to_y800(image)
        return self.scanner.scan(data, width, height)

    def free(self):
        self.scanner.free()

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.free()
