"""
Dash adapter layer: the only code that touches presentation primitives.
"""
