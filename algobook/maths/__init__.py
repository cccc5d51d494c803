"""Modular arithmetic, factorial tables and divisor functions."""