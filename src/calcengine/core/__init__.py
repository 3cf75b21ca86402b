"""
Core domain models and numeric primitives.

Value types of the calculator (numbers, stack, state phases, actions),
the Decimal evaluator and JSON Schema contracts. Independent of any UI.
"""
