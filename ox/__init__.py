"""A plugin-driven command line tool for working on Go web projects."""

__version__ = "1.5.3"