"""Small text filters and building blocks: keyword counting, cross-referencing, a symbol table, buffered files and a free-list allocator."""

__version__ = "0.1.0"