from hamming.codec import (
    classify,
    classify_extended,
    correct,
    correct_extended,
    decode,
    decode_extended,
    encode,
    encode_extended,
    error_position,
    error_positions,
    extract_data,
    extract_data_extended,
    flip_bit,
    inject_multiple,
    inject_single,
    syndrome,
    syndrome_extended,
)
from hamming.core import ErrorReport, ErrorType, Step
from hamming.pipeline import Block, HammingStateError, Transmission

__all__ = [
    'encode',
    'encode_extended',
    'syndrome',
    'syndrome_extended',
    'error_position',
    'classify',
    'classify_extended',
    'correct',
    'correct_extended',
    'extract_data',
    'extract_data_extended',
    'decode',
    'decode_extended',
    'inject_single',
    'inject_multiple',
    'flip_bit',
    'error_positions',
    'ErrorReport',
    'ErrorType',
    'Step',
    'Block',
    'Transmission',
    'HammingStateError',
]
