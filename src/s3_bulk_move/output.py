"""Record output for selected objects."""

from typing import Optional, TextIO

import typer


class RecordEmitter:
    """Writes one ``key<TAB>size`` line per selected object."""

    def __init__(self, stream: Optional[TextIO] = None):
        """Initialize the emitter.

        Args:
            stream: Text stream to write to; stdout if None
        """
        self.stream = stream
        self.count = 0

    def emit(self, key: str, size: int) -> None:
        # color=True keeps escape sequences in keys intact on non-tty streams
        typer.echo(f"{key}\t{size}", file=self.stream, color=True)
        self.count += 1
