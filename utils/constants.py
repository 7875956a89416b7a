"""Fixed tables shared by the codec and the file helpers."""

# BlurHash base83 alphabet. Order is part of the format.
BASE83_ALPHABET = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "#$%*+,-.:;=?@[]^_{|}~"
)

BASE83_INDEX = {char: index for index, char in enumerate(BASE83_ALPHABET)}

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

# Maximum AC magnitude is stored as one digit in [0, 82]
MAX_AC_SCALE = 166.0
MAX_AC_LEVELS = 82

# Per-channel AC quantization: 19 levels, 9 is zero
AC_LEVELS = 19
AC_ZERO_LEVEL = 9

SIDECAR_SUFFIX = ".bh"

IMAGE_EXTENSIONS = frozenset({
    ".jpg", ".jpeg", ".png", ".bmp", ".tif", ".tiff", ".webp",
})
