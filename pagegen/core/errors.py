"""
pagegen/core/errors.py
Error taxonomy.
  • GenerationError        → generator failed (absorbed when it happens in the background)
  • StartupGenerationError → seed generation failed → fatal, nothing is served
  • BindError              → listening socket could not be acquired → fatal

A busy regeneration guard is not an error - try_acquire() just returns False.
"""

from typing import Optional


class PagegenError(Exception):
    """Base class for everything this service raises on purpose."""


class GenerationError(PagegenError):
    def __init__(self, reason: str, model_id: Optional[str] = None):
        self.reason   = reason
        self.model_id = model_id
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.model_id:
            return f"Can't invoke '{self.model_id}'. Reason: {self.reason}"
        return f"Generation failed. Reason: {self.reason}"


class StartupGenerationError(GenerationError):
    """The very first generation failed. The process must not start serving."""

    @classmethod
    def wrap(cls, err: GenerationError) -> "StartupGenerationError":
        return cls(err.reason, err.model_id)


class BindError(PagegenError):
    def __init__(self, host: str, port: int, cause: OSError):
        self.host  = host
        self.port  = port
        self.cause = cause
        super().__init__(f"Cannot bind {host}:{port} - {cause}")
