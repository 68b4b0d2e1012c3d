"""Request and result models for component resolution."""

from typing import Any, Callable, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict
from returns.maybe import Maybe, Some

RESOLVE_KIND_FILE = 'file'


class ResolutionRequest(BaseModel):
    """A module request as seen by a resolution step.

    Attributes:
        base_path: Absolute directory the request is made from.
        request: Requested path. May be relative, absolute, use non-native
            separators, or be absent.
        query: Opaque query string, passed through untouched.
    """

    model_config = ConfigDict(frozen=True)

    base_path: str
    request: Optional[str] = None
    query: Optional[str] = None


class ResolvedFile(BaseModel):
    """A component file matched for a request."""

    model_config = ConfigDict(frozen=True)

    directory: str
    filename: str
    query: Optional[str] = None

    def to_descriptor(self) -> dict[str, Any]:
        """Return the descriptor handed to the pipeline's success sink."""
        return {'path': self.directory, 'query': self.query, 'request': self.filename}


class Continuation(NamedTuple):
    """Success sink and fallback pair for callback-style hosts."""

    do_resolve: Callable[[str, dict[str, Any], Callable[..., Any]], Any]
    callback: Callable[..., Any]


def continue_with(result: Maybe[ResolvedFile], continuation: Continuation) -> Any:
    """Hand a resolution outcome to exactly one continuation.

    A match goes to the success sink with the ``file`` kind, its descriptor
    and the original fallback, so a later failure can still fall through.
    Otherwise the fallback is called with no arguments.
    """
    if isinstance(result, Some):
        return continuation.do_resolve(RESOLVE_KIND_FILE, result.unwrap().to_descriptor(), continuation.callback)
    return continuation.callback()
