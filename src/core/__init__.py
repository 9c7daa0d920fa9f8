"""
Core domain models, mathematical primitives, and invariants.

Единицы измерения, физические величины и численные примитивы,
независимые от конкретных субстанций и калькуляторов.
"""
