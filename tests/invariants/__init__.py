"""
Structural invariants of Vec1.

These run random sequences of public operations and check after every
step that the container is never empty and agrees with a plain-list model.
"""
