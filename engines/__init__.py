"""BlurHash engines - pure computation plus the batch runner."""

from .color_space import srgb_to_linear, linear_to_srgb, image_to_linear, sign_pow
from .dct_engine import cosine_table, compute_components, synthesize
from .quantizer import encode_dc, decode_dc, encode_ac, decode_ac, quantize, dequantize
from . import base83
from .pipeline import encode, decode, components, encode_payload, decode_payload
from .batch import hash_image_file, run_batch

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'image_to_linear',
    'sign_pow',
    'cosine_table',
    'compute_components',
    'synthesize',
    'encode_dc',
    'decode_dc',
    'encode_ac',
    'decode_ac',
    'quantize',
    'dequantize',
    'base83',
    'encode',
    'decode',
    'components',
    'encode_payload',
    'decode_payload',
    'hash_image_file',
    'run_batch',
]
