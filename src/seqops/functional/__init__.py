"""Functional primitives for seqops.

Stateless, side-effect-free operations over one-dimensional numeric
sequences: reductions, cumulative aggregates and their inverses, quantifiers
and logical (mask) vectors. Numeric kernels are JIT-compiled with JAX; input
validation runs eagerly before the kernels so errors surface as Python
exceptions rather than traced values.
"""
