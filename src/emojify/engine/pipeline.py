"""Stream pipeline orchestrator.

StreamPipeline drives one translation over a byte stream:
- Reads chunks of arbitrary size
- Decodes them incrementally, holding back truncated multi-byte input
- Keeps a bounded carry-over of text that may still become a match
- Scans, translates and writes output in input order
"""

import asyncio
import codecs

from ..core.logging import get_logger
from ..exceptions import IOFailure, PipelineClosedError
from ..table.alias_table import AliasTable
from .config import PipelineConfig
from .scanner import Scanner
from .translator import Translator
from .types import Direction, PipelineMetrics, PipelineState

logger = get_logger(__name__)

# Invalid input bytes round-trip through lone surrogates unchanged
_ERRORS = "surrogateescape"


class StreamPipeline:
    """Translates a single byte stream in one sequential pass.

    The alias table is shared and read-only; everything else belongs to
    this pipeline, so independent pipelines can run side by side in
    threads or asyncio tasks.

    Example:
        pipeline = StreamPipeline(table, Direction.ENCODE)
        out = pipeline.feed(b"Hello :gr")   # b"Hello "
        out += pipeline.feed(b"in: world")  # b"\\xf0\\x9f\\x98\\x81 world"
        out += pipeline.close()

    or, over already-open binary streams:
        pipeline.run(sys.stdin.buffer, sys.stdout.buffer)

    """

    def __init__(self, table: AliasTable, direction: Direction, config: PipelineConfig | None = None):
        """Initialize the pipeline.

        Args:
            table: Alias table to translate against
            direction: ENCODE (aliases -> emoji) or DECODE (emoji -> aliases)
            config: Pipeline configuration (defaults when None)

        """
        self.table = table
        self.direction = direction
        self.config = config or PipelineConfig()

        self._scanner = Scanner(table)
        self._translator = Translator(table)
        self._decoder = codecs.getincrementaldecoder(self.config.encoding)(errors=_ERRORS)

        # Text scanned but not yet classified, and the last two consumed codepoints
        self._carry = ""
        self._preceding = ""

        self._state = PipelineState.IDLE
        self._metrics = PipelineMetrics(direction=direction)

    @property
    def state(self) -> PipelineState:
        """Current pipeline state."""
        return self._state

    @property
    def metrics(self) -> PipelineMetrics:
        """Current pipeline metrics."""
        return self._metrics

    @property
    def pending(self) -> str:
        """Carry-over text waiting for more input."""
        return self._carry

    @property
    def is_closed(self) -> bool:
        return self._state == PipelineState.CLOSED

    def _update_state(self, new_state: PipelineState) -> None:
        """Update pipeline state and sync with metrics."""
        self._state = new_state
        self._metrics.state = new_state

    # ------------------------------------------------------------------
    # Push interface
    # ------------------------------------------------------------------

    def feed(self, data: bytes) -> bytes:
        """Translate one chunk of input.

        Args:
            data: Next chunk of the input stream, split anywhere

        Returns:
            Output bytes that are final; undecided input is kept

        Raises:
            PipelineClosedError: If the pipeline was already drained

        """
        if self._state == PipelineState.CLOSED:
            raise PipelineClosedError(f"Cannot feed a closed {self.direction.value} pipeline")

        self._metrics.chunks_read += 1
        self._metrics.bytes_in += len(data)

        self._update_state(PipelineState.SCANNING)
        text = self._carry + self._decoder.decode(data)
        output = self._emit(text, final=False)
        self._update_state(PipelineState.READING)
        return output

    def close(self) -> bytes:
        """Drain the carry-over and close the pipeline.

        Anything still held back is emitted, translated if it now forms a
        complete match and literally otherwise. Closing twice is a no-op.
        """
        if self._state == PipelineState.CLOSED:
            return b""

        self._update_state(PipelineState.DRAINING)
        text = self._carry + self._decoder.decode(b"", final=True)
        output = self._emit(text, final=True)
        self._update_state(PipelineState.CLOSED)
        logger.debug(f"{self.direction.value} pipeline closed: {self._metrics.to_dict()}")
        return output

    def _emit(self, text: str, final: bool) -> bytes:
        result = self._scanner.scan(text, self.direction, final=final, preceding=self._preceding)
        self._update_state(PipelineState.EMITTING)

        if result.consumed:
            self._preceding = (self._preceding + text[max(result.consumed - 2, 0) : result.consumed])[-2:]
        self._carry = result.pending
        if len(self._carry) > self._metrics.max_carry_chars:
            self._metrics.max_carry_chars = len(self._carry)

        self._metrics.spans_translated += sum(1 for span in result.spans if span.is_match)
        output = self._translator.render(result.spans, self.direction).encode(self.config.encoding, _ERRORS)
        self._metrics.bytes_out += len(output)
        return output

    # ------------------------------------------------------------------
    # Blocking streams
    # ------------------------------------------------------------------

    def run(self, reader, writer) -> int:
        """Translate everything ``reader`` yields into ``writer``.

        Args:
            reader: Open binary stream with ``read(size)``
            writer: Open binary stream with ``write(data)``

        Returns:
            Number of bytes written

        Raises:
            IOFailure: If reading or writing fails

        """
        written = 0
        while True:
            self._update_state(PipelineState.READING)
            chunk = self._read(reader)
            if not chunk:
                break
            written += self._write(writer, self.feed(chunk))

        written += self._write(writer, self.close())
        return written

    def _read(self, reader) -> bytes:
        if getattr(reader, "closed", False):
            logger.debug("Reader already closed, draining")
            return b""
        try:
            chunk = reader.read(self.config.chunk_size)
        except ValueError as e:
            # Reading a file that was closed under us
            if getattr(reader, "closed", False):
                logger.debug("Reader closed mid-stream, draining")
                return b""
            raise IOFailure("read", e) from e
        except OSError as e:
            logger.error(f"Read failed: {e}")
            raise IOFailure("read", e) from e
        return chunk or b""

    def _write(self, writer, data: bytes) -> int:
        if not data:
            return 0
        try:
            writer.write(data)
            if self.config.flush_writes:
                flush = getattr(writer, "flush", None)
                if flush is not None:
                    flush()
        except (OSError, ValueError) as e:
            logger.error(f"Write failed: {e}")
            raise IOFailure("write", e) from e
        return len(data)

    # ------------------------------------------------------------------
    # asyncio streams
    # ------------------------------------------------------------------

    async def run_async(self, reader, writer) -> int:
        """Translate an asyncio stream.

        Args:
            reader: Object with ``async read(size)``, e.g. asyncio.StreamReader
            writer: Object with ``write(data)`` and optionally ``async drain()``

        Returns:
            Number of bytes written

        Raises:
            IOFailure: If reading or writing fails

        """
        written = 0
        try:
            while True:
                self._update_state(PipelineState.READING)
                chunk = await self._read_async(reader)
                if not chunk:
                    break
                written += await self._write_async(writer, self.feed(chunk))
        except asyncio.CancelledError:
            tail = self.close()
            if tail:
                try:
                    writer.write(tail)
                except (OSError, ValueError, RuntimeError) as e:
                    logger.warning(f"Could not flush carry-over after cancellation: {e}")
            raise

        written += await self._write_async(writer, self.close())
        return written

    async def _read_async(self, reader) -> bytes:
        try:
            chunk = await reader.read(self.config.chunk_size)
        except OSError as e:
            logger.error(f"Read failed: {e}")
            raise IOFailure("read", e) from e
        return chunk or b""

    async def _write_async(self, writer, data: bytes) -> int:
        if not data:
            return 0
        try:
            writer.write(data)
            drain = getattr(writer, "drain", None)
            if drain is not None:
                await drain()
        except (OSError, ValueError) as e:
            logger.error(f"Write failed: {e}")
            raise IOFailure("write", e) from e
        return len(data)
