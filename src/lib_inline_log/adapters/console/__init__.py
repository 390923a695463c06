"""Console sinks implementing :class:`lib_inline_log.application.ports.ConsolePort`."""
