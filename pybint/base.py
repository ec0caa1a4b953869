#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

'''
Stateless wraparound arithmetic that is used by the bounded integer class,
on plain Python ints and on numpy arrays of successive steps.
'''


class UnderflowError(ArithmeticError):
    '''
    An unsigned subtraction went below zero, i.e. wrapping down from a zero
    value when the boundary is also zero.
    '''


def calc_up(value, boundary):
    '''
    Next value up from `value`, wrapping to zero at `boundary`. Python ints are
    unbounded, so the addition cannot overflow the fixed width before the modulo.
    Raises ZeroDivisionError for a zero boundary.
    '''
    return (int(value) + 1) % int(boundary)


def calc_down(value, boundary):
    '''
    Next value down from `value`, wrapping to `boundary - 1` below zero.
    '''
    value, boundary = int(value), int(boundary)
    if value == 0:
        if boundary == 0:
            raise UnderflowError(f"Wrapping down from {value} underflows a {boundary} boundary")
        return boundary - 1
    return (value - 1) % boundary


def calc_ups(value, boundary, steps):
    '''
    Array of the `steps` values that repeated calls to calc_up() visit, starting
    after `value`. Same results as the scalar function, even when `value` starts
    out-of-range, since ((v + 1) % b + 1) % b == (v + 2) % b.
    '''
    boundary = int(boundary)
    offsets = _calc_step_offsets(steps, boundary)
    if len(offsets) == 0:
        return _calc_step_values(offsets, boundary)
    if boundary == 0:
        raise ZeroDivisionError("integer modulo by zero")
    return _calc_step_values(np.mod(int(value) % boundary + offsets, boundary), boundary)


def calc_downs(value, boundary, steps):
    '''
    Array of the `steps` values that repeated calls to calc_down() visit, starting
    after `value`. The wrap from zero to `boundary - 1` is just (0 - 1) mod boundary,
    since numpy's integer modulo takes the sign of the divisor.
    '''
    boundary = int(boundary)
    offsets = _calc_step_offsets(steps, boundary)
    if len(offsets) == 0:
        return _calc_step_values(offsets, boundary)
    if boundary == 0:
        if int(value) == 0:
            raise UnderflowError(f"Wrapping down from {value} underflows a {boundary} boundary")
        raise ZeroDivisionError("integer modulo by zero")
    return _calc_step_values(np.mod(int(value) % boundary - offsets, boundary), boundary)


# Past this boundary, start + offset could leave int64, so step as Python ints.
MAX_INT64_BOUNDARY = 2 ** 62


def _calc_step_offsets(steps, boundary):
    steps = int(steps)
    if steps < 0:
        raise ValueError(f"Cannot take {steps:,d} steps, must be non-negative")
    if boundary > MAX_INT64_BOUNDARY or steps > MAX_INT64_BOUNDARY:
        return np.arange(1, steps + 1, dtype=object)
    return np.arange(1, steps + 1, dtype=np.int64)


def _calc_step_values(values, boundary):
    '''
    Unsigned 64-bit array of stepped values, or Python ints when a boundary is too
    wide for that.
    '''
    if boundary > 2 ** 64:
        return values.astype(object)
    return values.astype(np.uint64)
