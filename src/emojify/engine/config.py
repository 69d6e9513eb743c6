"""Stream pipeline configuration.

Provides PipelineConfig with defaults, loadable from the [emojify]
section of the config file.
"""

from dataclasses import dataclass

from ..core.config import ConfigLoader, get_config

DEFAULT_CHUNK_SIZE = 4096


@dataclass
class PipelineConfig:
    """Configuration for stream pipelines."""

    # Bytes requested per read
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Text encoding of both streams
    encoding: str = "utf-8"

    # Call writer.flush() after every write when available
    flush_writes: bool = True

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @classmethod
    def from_config(cls, config: ConfigLoader | None = None) -> "PipelineConfig":
        """Load pipeline config from the config file."""
        config = config or get_config()
        return cls(
            chunk_size=config.chunk_size,
            encoding=config.encoding,
            flush_writes=bool(config.get("stream.flush_writes", True)),
        )
