"""
NumPy-backed implementation of ndlite: storage, the concrete Array, CPU ops.
"""
