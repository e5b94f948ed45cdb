from formatters.base import AnyDiff, BaseFormatter, FormatterFactory


class CompactFormatter(BaseFormatter):
    """One-line debug notation: ``[-'b'@1, +'d'@3]`` or ``[d(0 1), is(1)]``."""

    def _format_impl(self, result: AnyDiff, label1: str, label2: str):
        self._writeln(repr(result))


FormatterFactory.register("compact", CompactFormatter)
