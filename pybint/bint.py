#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import pybint.base
from pybint.base import UnderflowError


class Bint:
    '''
    A bounded integer, an unsigned integer that wraps back around to zero when
    it reaches its (exclusive) boundary. Valid values are 0 .. boundary - 1.

    Both fields are public and plain to set, so nothing stops a value at or past
    the boundary. Stepping such a value just reduces it modulo the boundary.
    '''

    def __init__(self, value, boundary, num_bits=8):
        '''
        Initialize directly from a value and a boundary, neither checked against the
        other. Use Bint.checked() to reject a value outside of the boundary.
        :param value: Current integer value
        :param boundary: Exclusive upper bound, where the value wraps to zero
        :param num_bits: Number of bits for both unsigned integer fields. Defaults to 8
        for a traditional unsigned byte.
        '''
        self.value = int(value)
        self.boundary = int(boundary)
        self.num_bits = num_bits
        assert self.value in range(2 ** num_bits), f"Value {self.value} out-of-range for unsigned {num_bits:,d} bits"
        assert self.boundary in range(2 ** num_bits), f"Boundary {self.boundary} out-of-range for unsigned {num_bits:,d} bits"

    @classmethod
    def new(cls, boundary, num_bits=8):
        '''
        A zero value with the given boundary. A zero boundary is accepted here, but
        cannot be stepped.
        '''
        return cls(0, boundary, num_bits=num_bits)

    @classmethod
    def checked(cls, value, boundary, num_bits=8):
        '''
        Like the direct constructor, but requires a positive boundary and a value
        inside of it.
        '''
        if int(boundary) == 0:
            raise ValueError("Boundary must be positive")
        if int(value) >= int(boundary):
            raise ValueError(f"Value {value} out-of-range for {boundary} boundary")
        return cls(value, boundary, num_bits=num_bits)

    def increment(self):
        return self.__class__(pybint.base.calc_up(self.value, self.boundary), self.boundary, num_bits=self.num_bits)

    def decrement(self):
        return self.__class__(pybint.base.calc_down(self.value, self.boundary), self.boundary, num_bits=self.num_bits)

    def increments(self, steps):
        '''
        Values visited by `steps` successive increments, as a numpy array.
        '''
        steps = int(steps)
        logging.debug(f"Stepping {self!r} up {steps:,d} times.")
        return pybint.base.calc_ups(self.value, self.boundary, steps)

    def decrements(self, steps):
        '''
        Values visited by `steps` successive decrements, as a numpy array.
        '''
        steps = int(steps)
        logging.debug(f"Stepping {self!r} down {steps:,d} times.")
        return pybint.base.calc_downs(self.value, self.boundary, steps)

    def __str__(self):
        return str(self.value)

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self.value.__format__(*fmt_args)

    def __repr__(self):
        return f"bint{self.value}/{self.boundary}"

    def __eq__(self, o):
        if not isinstance(o, Bint):
            return NotImplemented
        return (self.value, self.boundary) == (o.value, o.boundary)

    '''
    Ordering only looks at the values, like the underlying Python int() operators.
    '''
    def __lt__(self, o): return self.value < o.value if isinstance(o, Bint) else NotImplemented
    def __le__(self, o): return self.value <= o.value if isinstance(o, Bint) else NotImplemented
    def __gt__(self, o): return self.value > o.value if isinstance(o, Bint) else NotImplemented
    def __ge__(self, o): return self.value >= o.value if isinstance(o, Bint) else NotImplemented
