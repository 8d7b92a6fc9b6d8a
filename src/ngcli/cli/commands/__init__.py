"""Built-in ng commands.

Modules in this package are scanned by ``CommandRegistry.discover()``.
Each module defines one ``Command`` subclass with a class-level
``description``.
"""
