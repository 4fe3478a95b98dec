import numpy as np
from PIL import Image

# ITU-R 601-2 luma, the same weights PIL uses for convert('L')
LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.uint32)

def to_y800(image):
    """convert an image to the 8-bit grayscale layout zbar scans

    Args:
        image : a PIL image, or a uint8 numpy array of shape (H, W), (H, W, 1), (H, W, 3) or (H, W, 4)

    Raises:
        ValueError: unsupported array dtype or shape

    Returns:
        tuple: (data, width, height) with data holding width * height bytes
    """
    if isinstance(image, Image.Image):
        if image.mode != 'L':
            image = image.convert('L')
        width, height = image.size
        return image.tobytes(), width, height

    arr = np.asarray(image)
    if arr.dtype != np.uint8:
        raise ValueError(f'unsupported dtype {arr.dtype}, expected uint8')
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[..., 0]
    if arr.ndim == 3:
        if arr.shape[2] not in (3, 4):
            raise ValueError(f'unsupported number of channels {arr.shape[2]}')
        # alpha is ignored
        arr = ((arr[..., :3].astype(np.uint32) @ LUMA_WEIGHTS + 500) // 1000).astype(np.uint8)
    elif arr.ndim != 2:
        raise ValueError(f'unsupported shape {arr.shape}')

    height, width = arr.shape
    return np.ascontiguousarray(arr).tobytes(), width, height
