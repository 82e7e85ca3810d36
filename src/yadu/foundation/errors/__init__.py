"""Error handling for yadu.

- ErrorCode: failure classes of a handle() call
- LogError: structured error payload
- YaduException/SerializationError/WriteError: exceptions raised to the facade
"""

from .errors import ErrorCode, LogError, SerializationError, WriteError, YaduException

__all__ = ["ErrorCode", "LogError", "YaduException", "SerializationError", "WriteError"]
