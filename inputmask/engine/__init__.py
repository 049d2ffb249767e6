# inputmask/engine/__init__.py

"""Engine package providing the mask template engine.

The engine applies a token/literal template to user input and strips a
masked value back to its raw content.
"""
