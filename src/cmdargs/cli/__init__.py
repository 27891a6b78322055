"""CLI layer — console output, exit codes, and the demo program.

This package is the outermost layer.  It may import from ``core``,
``config`` and the parser facade; only the facade imports back into
it, and only for the default :class:`~cmdargs.cli.console.ConsoleSink`.
"""
