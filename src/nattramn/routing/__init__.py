"""Routing — positional segment matching over an ordered page table.

Patterns are parsed and validated when the page table is compiled;
the first page whose pattern matches a request path wins.
"""
