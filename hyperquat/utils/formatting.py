"""
Text rendering of algebra values.

A value a + b·e1 + c·e2 + d·e3 renders as "(a+be1+ce2+de3)" with the unit
symbols of its signature, for example "(1+2i+3j+4k)" (elliptic),
"(1+2i+3t+4u)" (split) or "(1+2s+3t+4u)" (hyperbolic). Numbers use %g;
infinities render as "+Inf"/"-Inf", NaN as "NaN", and negative zero keeps
its sign ("-0").
"""

import math
from typing import List


def _format_number(v: float) -> str:
    if math.isnan(v):
        return 'NaN'
    if math.isinf(v):
        return '+Inf' if v > 0 else '-Inf'
    return f"{v:g}"


def _format_component(v: float) -> str:
    # Later components always carry an explicit sign
    if math.isnan(v):
        return '+NaN'
    text = _format_number(v)
    if math.copysign(1.0, v) < 0 or math.isinf(v):
        return text
    return '+' + text


def _format_row(values: List[float], symbols) -> str:
    parts = ['(', _format_number(values[0])]
    for v, symbol in zip(values[1:], symbols):
        parts.append(_format_component(v))
        parts.append(symbol)
    parts.append(')')
    return ''.join(parts)


def format_quaternion(z) -> str:
    """
    Render a value, or a bracketed list of values for batched input.

    Args:
        z: Quaternion

    Returns:
        Display string
    """
    symbols = z.signature.symbols
    if z.q.dim() == 1:
        return _format_row(z.tolist(), symbols)
    rows = z.q.reshape(-1, z.q.shape[-1]).tolist()
    return '[' + ', '.join(_format_row(row, symbols) for row in rows) + ']'
