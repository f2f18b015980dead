"""
Per-kind emission rules.

Every rule has the signature ``rule(emitter, node, parent) -> None``: it
consults only its own node and the immediate `ParentContext`, and writes a
syntactically self-contained rendering into the emitter's buffer.
"""
